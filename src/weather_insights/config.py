# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing. Only [location] is required; the other
sections fall back to DEFAULTS.
"""

import copy
import tomllib
from pathlib import Path

from weather_insights.dates import DEFAULT_RANGE_DAYS
from weather_insights.utils import DEFAULT_LOG_PATH
from weather_insights.weather import DEFAULT_TIMEOUT, OPEN_METEO_URL

DEFAULT_CONFIG_PATH = Path("config.toml")

# Abuja, Nigeria
DEFAULTS: dict = {
    "location": {
        "latitude": 9.0765,
        "longitude": 7.3986,
        "name": "Abuja, Nigeria",
    },
    "range": {
        "default_days": DEFAULT_RANGE_DAYS,
    },
    "api": {
        "url": OPEN_METEO_URL,
        "timeout": DEFAULT_TIMEOUT,
    },
    "log": {
        "path": str(DEFAULT_LOG_PATH),
    },
}


def default_config() -> dict:
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULTS)


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values, with optional sections filled
        in from DEFAULTS.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or mistyped.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and fill in your location."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return _with_defaults(config)


def _with_defaults(config: dict) -> dict:
    merged = default_config()
    for section, values in config.items():
        if isinstance(values, dict) and section in merged:
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def _validate(config: dict) -> None:
    """Validate the config sections this project reads.

    Expected config schema::

        [location]
        latitude  = <float>   # decimal degrees, e.g. 9.0765
        longitude = <float>   # decimal degrees, e.g. 7.3986
        name      = <str>     # display name, e.g. "Abuja, Nigeria"

        [range]                        # optional
        default_days = <int>  # days before today the default range starts

        [api]                          # optional
        url     = <str>       # daily weather endpoint
        timeout = <float>     # seconds

        [log]                          # optional
        path = <str>          # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent, or a value
            has the wrong type.
    """
    if "location" not in config:
        raise ValueError("Missing required config section: [location]")

    location = config["location"]
    for key in ("latitude", "longitude", "name"):
        if key not in location:
            raise ValueError(f"Missing required config key: [location].{key}")

    for key in ("latitude", "longitude"):
        value = location[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"[location].{key} must be a number, got {value!r}")

    if not -90 <= location["latitude"] <= 90:
        raise ValueError("[location].latitude must be between -90 and 90")
    if not -180 <= location["longitude"] <= 180:
        raise ValueError("[location].longitude must be between -180 and 180")

    default_days = config.get("range", {}).get("default_days", DEFAULT_RANGE_DAYS)
    if isinstance(default_days, bool) or not isinstance(default_days, int) or default_days < 0:
        raise ValueError("[range].default_days must be a non-negative integer")

    timeout = config.get("api", {}).get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("[api].timeout must be a positive number")
