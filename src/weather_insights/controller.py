# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
controller.py — Own the dashboard's fetch state and the date-range gate.

The controller holds three pieces of state (records, loading flag, error
message) and changes them only through load(). The dashboard reads the
state and calls apply_filter(), which checks the date range before any
network call is made.

Overlapping loads are resolved by generation: each load takes a new token,
and a load whose token is no longer current discards its result, so the
most recently issued request always wins.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from weather_insights.dates import is_valid_range
from weather_insights.utils import log, log_error
from weather_insights.weather import UNKNOWN_ERROR_MESSAGE, fetch_weather

RANGE_ERROR_MESSAGE = "Start date cannot be after end date."
NO_DATA_MESSAGE = "No weather data returned for the selected range."


class RangeValidationError(ValueError):
    """Raised when a start date falls after its end date."""


def require_valid_range(start_date: str | date, end_date: str | date) -> None:
    """Raise RangeValidationError unless start_date <= end_date."""
    if not is_valid_range(start_date, end_date):
        raise RangeValidationError(RANGE_ERROR_MESSAGE)


@dataclass
class FetchState:
    """Snapshot of the data the dashboard renders from."""
    records: list[dict] | None = None
    loading: bool = False
    error: str | None = None


class WeatherDataController:
    """Single owner of FetchState for one dashboard session.

    Args:
        fetcher: Callable with fetch_weather's signature. Tests pass fakes.
        log_path: If set, fetch failures are appended to this log file.
    """

    def __init__(
        self,
        fetcher: Callable[..., list[dict]] = fetch_weather,
        log_path: Path | None = None,
    ):
        self._fetcher = fetcher
        self._log_path = log_path
        self._generation = 0
        self.state = FetchState()
        self.range_error: str | None = None

    @property
    def records(self) -> list[dict] | None:
        return self.state.records

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error_message(self) -> str | None:
        return self.state.error

    def load(
        self,
        latitude: float,
        longitude: float,
        start_date: str,
        end_date: str,
    ) -> FetchState:
        """Fetch weather for the range and store the outcome.

        Prior records and errors are cleared before the request starts.
        Fetch failures are stored as the error message, never raised.

        Returns:
            The controller's state after this call settles.
        """
        self._generation += 1
        token = self._generation
        self.state = FetchState(records=None, loading=True, error=None)

        try:
            records = self._fetcher(latitude, longitude, start_date, end_date)
        except Exception as e:
            # WeatherFetchError in practice; anything else still has to settle the state
            if token == self._generation:
                self._fail(str(e) or UNKNOWN_ERROR_MESSAGE)
            return self.state

        if token != self._generation:
            # A newer load was issued while this one was in flight
            return self.state

        if not records:
            self._fail(NO_DATA_MESSAGE)
        else:
            self.state = FetchState(records=records, loading=False, error=None)
        return self.state

    def apply_filter(
        self,
        latitude: float,
        longitude: float,
        start_date: str,
        end_date: str,
    ) -> bool:
        """Validate the date range, then load it.

        An invalid range sets range_error and skips the fetch entirely; the
        fetch state is left untouched.

        Returns:
            True if a load was performed.
        """
        if not is_valid_range(start_date, end_date):
            self.range_error = RANGE_ERROR_MESSAGE
            return False
        self.range_error = None
        self.load(latitude, longitude, start_date, end_date)
        return True

    def _fail(self, message: str) -> None:
        self.state = FetchState(records=None, loading=False, error=message)
        log(message)
        if self._log_path is not None:
            log_error(message, log_path=self._log_path)
