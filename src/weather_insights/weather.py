# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch historical daily weather from Open-Meteo.

Open-Meteo is free and requires no API key. We request max/min temperature
and precipitation for an inclusive date range and reshape the columnar
`daily` block into one dict per day.

Every failure leaves this module as a WeatherFetchError subclass so callers
only ever need to catch one exception type.

API docs: https://open-meteo.com/en/docs
"""

import requests

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = 10  # seconds

# Fields requested from the daily endpoint, in request order
DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
]

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class WeatherFetchError(RuntimeError):
    """Base class for every failure raised by fetch_weather."""


class HttpStatusError(WeatherFetchError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class TransportError(WeatherFetchError):
    """The request never produced a usable response (network or JSON failure)."""


class PayloadDecodeError(WeatherFetchError):
    """The response JSON does not have the expected daily structure."""


def build_params(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
) -> dict:
    """Build the query parameters for a daily weather request.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        start_date: First day, 'YYYY-MM-DD'.
        end_date: Last day (inclusive), 'YYYY-MM-DD'.

    Returns:
        Dict suitable for requests' ``params=`` argument.
    """
    return {
        "latitude": latitude,
        "longitude": longitude,
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": "auto",
        "start_date": start_date,
        "end_date": end_date,
    }


def fetch_weather(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
    *,
    url: str = OPEN_METEO_URL,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> list[dict]:
    """Fetch daily temperature and precipitation for a date range.

    A single GET request is made; failures are not retried.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        start_date: First day, 'YYYY-MM-DD'.
        end_date: Last day (inclusive), 'YYYY-MM-DD'.
        url: Endpoint to query. Defaults to the Open-Meteo forecast API.
        timeout: Seconds to wait for the server. None waits forever.

    Returns:
        List of dicts, one per day, each containing date, max_temp,
        min_temp and precipitation.

    Raises:
        HttpStatusError: If the API returns a non-success status.
        TransportError: If the request fails or the body is not JSON.
        PayloadDecodeError: If the JSON lacks the expected daily arrays.
    """
    params = build_params(latitude, longitude, start_date, end_date)

    try:
        response = requests.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransportError(str(e) or UNKNOWN_ERROR_MESSAGE) from e

    if not response.ok:
        raise HttpStatusError(_status_error_message(response), response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(str(e) or UNKNOWN_ERROR_MESSAGE) from e

    return transform_daily(data)


def _status_error_message(response: requests.Response) -> str:
    """Describe a failed response, preferring the API's own 'reason' field.

    Open-Meteo reports bad input as ``{"error": true, "reason": "..."}``.
    """
    message = f"Failed to fetch weather data: {response.status_code} {response.reason}"
    try:
        body = response.json()
    except ValueError:
        return message
    if isinstance(body, dict) and body.get("reason"):
        return f"API Error: {body['reason']}"
    return message


def transform_daily(data: dict) -> list[dict]:
    """Reshape the columnar Open-Meteo daily block into one record per day.

    Record order follows daily.time; nothing is re-sorted and values are
    passed through unchanged (the API sends null for missing readings).

    Args:
        data: Parsed JSON response containing a 'daily' object.

    Returns:
        List of dicts with keys date, max_temp, min_temp, precipitation.

    Raises:
        PayloadDecodeError: If 'daily' or one of its arrays is missing, or
            the arrays differ in length.
    """
    daily = data.get("daily") if isinstance(data, dict) else None
    if not isinstance(daily, dict):
        raise PayloadDecodeError("Unexpected API response structure: missing 'daily' data.")

    columns = {}
    for key in ["time", *DAILY_VARIABLES]:
        values = daily.get(key)
        if not isinstance(values, list):
            raise PayloadDecodeError(f"Unexpected API response structure: missing daily.{key}.")
        columns[key] = values

    lengths = {key: len(values) for key, values in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{key}={n}" for key, n in lengths.items())
        raise PayloadDecodeError(f"Daily arrays have mismatched lengths ({detail}).")

    dates = columns["time"]
    temp_max = columns["temperature_2m_max"]
    temp_min = columns["temperature_2m_min"]
    precip = columns["precipitation_sum"]

    records = []
    for i, date_str in enumerate(dates):
        records.append({
            "date": date_str,
            "max_temp": temp_max[i],
            "min_temp": temp_min[i],
            "precipitation": precip[i],
        })
    return records
