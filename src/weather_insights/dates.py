# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
dates.py — Calendar helpers for the dashboard's date range.

All dates travel as ISO 'YYYY-MM-DD' strings, the same format the Open-Meteo
API accepts for start_date / end_date and echoes back in daily.time.
Parsing is pinned to that exact format so comparisons never depend on the
locale or on the machine's timezone.
"""

from datetime import date, datetime, timedelta

ISO_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_RANGE_DAYS = 6  # 7 days including today


def today() -> str:
    """Return the current local calendar date as an ISO string."""
    return date.today().isoformat()


def days_ago(n: int, today: date | None = None) -> str:
    """Return the calendar date n days before today as an ISO string.

    Args:
        n: Number of days to go back. 0 returns today.
        today: Reference date. Defaults to the local clock's date.

    Returns:
        ISO date string, e.g. '2024-03-04' for n=6 and today=2024-03-10.
    """
    reference = today if today is not None else date.today()
    return (reference - timedelta(days=n)).isoformat()


def parse_date(value: str | date) -> date:
    """Parse a 'YYYY-MM-DD' string into a date.

    date values are returned unchanged.

    Raises:
        ValueError: If the string is not a valid 'YYYY-MM-DD' date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def is_valid_range(start: str | date, end: str | date) -> bool:
    """Return True if start is on or before end.

    A single-day range (start == end) is valid. Strings that do not parse as
    'YYYY-MM-DD' make the range invalid.
    """
    try:
        return parse_date(start) <= parse_date(end)
    except (TypeError, ValueError):
        return False


def default_range(days: int = DEFAULT_RANGE_DAYS, today: date | None = None) -> tuple[str, str]:
    """Return (start, end) covering the last `days` days up to and including today."""
    reference = today if today is not None else date.today()
    return days_ago(days, today=reference), reference.isoformat()


def fmt_chart_date(date_str: str) -> str:
    """Format an ISO date as a short axis label like 'Mar 4'."""
    dt = parse_date(date_str)
    return f"{dt.strftime('%b')} {dt.day}"
