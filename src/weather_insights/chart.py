# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — ASCII table and bar chart rendering for the command line.

Uses only the Python standard library (os).
All rendering functions return strings ready to print.
"""

import os

from weather_insights.utils import fmt_day

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar


def _num(value: float | None) -> float:
    # The API sends null for days it has no reading for
    return value if value is not None else 0.0


def _terminal_bar_width() -> int:
    try:
        terminal_width = os.get_terminal_size().columns
    except OSError:
        terminal_width = FALLBACK_TERMINAL_WIDTH
    return max(10, terminal_width - BAR_LABEL_RESERVE)


def render_daily_table(records: list[dict], location_line: str) -> str:
    """Render daily weather records as a fixed-width ASCII table.

    Args:
        records: List of daily records from fetch_weather.
        location_line: Display name for the location header.

    Returns:
        Multi-line string containing the formatted table.
    """
    header_label = f"📍 {location_line} — {len(records)} day(s)"
    header_row = "  ".join(["Day       ", " Max°C", " Min°C", " Precip mm"])
    sep = "─" * len(header_row)

    lines = [header_label, sep, header_row, sep]
    for r in records:
        lines.append("  ".join([
            f"{fmt_day(r['date']):<10}",
            f"{_num(r['max_temp']):>5.1f}°",
            f"{_num(r['min_temp']):>5.1f}°",
            f"{_num(r['precipitation']):>10.1f}",
        ]))
    lines.append(sep)
    return "\n".join(lines)


def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def render_bar_chart(
    labels: list[str],
    values: list[float],
    title: str,
    unit: str = "",
    bar_width: int | None = None,
) -> str:
    """Render a labelled horizontal bar chart.

    Negative values are shifted so the smallest value maps to an empty bar;
    the printed value is always the real one.

    Args:
        labels: List of row label strings.
        values: List of numeric values corresponding to each label.
        title: Chart title printed above the bars.
        unit: Optional unit suffix appended to each value (e.g. '°C', ' mm').
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.

    Returns:
        Multi-line string containing the chart.
    """
    if bar_width is None:
        bar_width = _terminal_bar_width()

    lowest = min(values) if values else 0
    offset = -lowest if lowest < 0 else 0
    shifted = [v + offset for v in values]
    max_val = max(shifted) if shifted else 1
    if max_val == 0:
        max_val = 1  # avoid division by zero

    label_w = max(len(lbl) for lbl in labels) if labels else 3
    lines = [title]
    for label, value, scaled in zip(labels, values, shifted):
        bar = _bar(scaled, max_val, bar_width)
        val_str = f"{value:.1f}{unit}"
        lines.append(f"  {label:<{label_w}} │{bar}│ {val_str:>8}")

    return "\n".join(lines)


def render_daily_charts(records: list[dict], bar_width: int | None = None) -> str:
    """Render the max temperature and precipitation charts for daily records.

    Args:
        records: List of daily records from fetch_weather.
        bar_width: Bar width override; auto-detected from terminal if None.

    Returns:
        Multi-line string containing both charts.
    """
    labels = [fmt_day(r["date"]) for r in records]
    temps = [_num(r["max_temp"]) for r in records]
    precip = [_num(r["precipitation"]) for r in records]

    return (
        render_bar_chart(labels, temps, "Temperature (max°C)", unit="°C", bar_width=bar_width)
        + "\n\n"
        + render_bar_chart(labels, precip, "Precipitation (mm)", unit=" mm", bar_width=bar_width)
    )
