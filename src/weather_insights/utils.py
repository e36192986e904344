# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: console output, failure logging and day labels.
"""

from datetime import datetime
from pathlib import Path

DEFAULT_LOG_PATH = Path("logs/weather_insights.log")


def fmt_day(date_str: str) -> str:
    """Format a date string as a short human-readable label.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    return dt.strftime("%a %d %b")


def log(message: str, tag: str = "weather") -> None:
    """Print a tagged status line, e.g. '[weather] Fetching 7 days...'."""
    print(f"[{tag}] {message}")


def log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure
