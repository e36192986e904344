# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-insights.

We use argparse (stdlib) rather than click: one command with a handful of
options does not need more.

Usage:
  weather-insights                                  — last 7 days for the configured location
  weather-insights --start 2024-03-01 --end 2024-03-10
  weather-insights --lat 51.5 --lon -0.12 --no-charts
"""

import argparse
from pathlib import Path

from weather_insights.chart import render_daily_charts, render_daily_table
from weather_insights.config import DEFAULT_CONFIG_PATH, default_config, load_config
from weather_insights.controller import RangeValidationError, WeatherDataController, require_valid_range
from weather_insights.dates import default_range, parse_date
from weather_insights.utils import log
from weather_insights.weather import fetch_weather


def _resolve_config(path: Path, explicit: bool) -> dict:
    """Load the config file, falling back to built-in defaults if it is absent.

    A missing file is only an error when the user named it with --config.
    """
    try:
        return load_config(path)
    except FileNotFoundError:
        if explicit:
            raise
        return default_config()


def run(args: argparse.Namespace) -> None:
    """Fetch the requested range and print the table and charts."""
    try:
        config = _resolve_config(Path(args.config), explicit=args.config != str(DEFAULT_CONFIG_PATH))
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    location = config["location"]
    latitude = args.lat if args.lat is not None else location["latitude"]
    longitude = args.lon if args.lon is not None else location["longitude"]
    if args.lat is not None or args.lon is not None:
        display_name = f"{latitude:.4f}°, {longitude:.4f}°"
    else:
        display_name = location["name"]

    default_start, default_end = default_range(config["range"]["default_days"])
    start_date = args.start or default_start
    end_date = args.end or default_end

    for flag, value in (("--start", start_date), ("--end", end_date)):
        try:
            parse_date(value)
        except ValueError:
            print(f"[error] Invalid {flag} date: '{value}'. Use YYYY-MM-DD.")
            raise SystemExit(1)

    try:
        require_valid_range(start_date, end_date)
    except RangeValidationError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    api = config["api"]

    def _fetch(lat, lon, start, end):
        return fetch_weather(lat, lon, start, end, url=api["url"], timeout=api["timeout"])

    controller = WeatherDataController(fetcher=_fetch, log_path=Path(config["log"]["path"]))

    log(f"Fetching daily weather for {display_name} ({start_date} → {end_date})...")
    state = controller.load(latitude, longitude, start_date, end_date)

    if state.error:
        print(f"[error] {state.error}")
        raise SystemExit(1)

    print()
    print(render_daily_table(state.records, display_name))
    if not args.no_charts:
        print()
        print(render_daily_charts(state.records))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="weather-insights",
        description="Historical daily temperature and precipitation from Open-Meteo",
    )
    parser.add_argument("--start", metavar="YYYY-MM-DD", default=None,
                        help="First day of the range. Default: [range].default_days before today.")
    parser.add_argument("--end", metavar="YYYY-MM-DD", default=None,
                        help="Last day of the range (inclusive). Default: today.")
    parser.add_argument("--lat", type=float, default=None, help="Latitude override in decimal degrees")
    parser.add_argument("--lon", type=float, default=None, help="Longitude override in decimal degrees")
    parser.add_argument("--config", metavar="PATH", default=str(DEFAULT_CONFIG_PATH),
                        help="TOML config file. Default: config.toml")
    parser.add_argument("--no-charts", action="store_true", help="Print the table only")

    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
