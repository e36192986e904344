# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
figures.py — Plotly figures for the dashboard's two chart cards.

Kept outside app/ so the figures can be built and checked without a
running Streamlit session.
"""

import plotly.graph_objects as go

from weather_insights.dates import fmt_chart_date

MAX_TEMP_COLOR = "#E53E3E"
MIN_TEMP_COLOR = "#4299E1"
PRECIP_COLOR = "#48BB78"

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
              color="#4A5568", size=12),
    margin=dict(l=20, r=30, t=16, b=8),
    legend=dict(orientation="h", yanchor="top", y=-0.15, bgcolor="rgba(0,0,0,0)"),
    hoverlabel=dict(bgcolor="#2D3748", font=dict(color="#FFFFFF")),
    xaxis=dict(showgrid=True, gridcolor="#e0e0e0", griddash="dash", zeroline=False,
               type="date", tickformat="%b %-d"),
    yaxis=dict(showgrid=True, gridcolor="#e0e0e0", griddash="dash", zeroline=False),
)


def _axis_labels(records: list[dict]) -> list[str]:
    return [fmt_chart_date(r["date"]) for r in records]


def temperature_figure(records: list[dict], height: int = 300) -> go.Figure:
    """Line chart of daily max and min temperature in °C."""
    labels = _axis_labels(records)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[r["date"] for r in records],
        customdata=labels,
        y=[r["max_temp"] for r in records],
        name="Max Temp",
        mode="lines+markers",
        line=dict(color=MAX_TEMP_COLOR, width=2, shape="spline"),
        hovertemplate="Date: %{customdata}<br>Max Temp: %{y}°C<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=[r["date"] for r in records],
        customdata=labels,
        y=[r["min_temp"] for r in records],
        name="Min Temp",
        mode="lines+markers",
        line=dict(color=MIN_TEMP_COLOR, width=2, shape="spline"),
        hovertemplate="Date: %{customdata}<br>Min Temp: %{y}°C<extra></extra>",
    ))
    fig.update_layout(**PLOTLY_LAYOUT, height=height)
    fig.update_yaxes(title_text="Temperature (°C)")
    return fig


def precipitation_figure(records: list[dict], height: int = 300) -> go.Figure:
    """Bar chart of daily precipitation sums in mm."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[r["date"] for r in records],
        customdata=_axis_labels(records),
        y=[r["precipitation"] for r in records],
        name="Daily Precipitation",
        marker_color=PRECIP_COLOR,
        marker_line_width=0,
        hovertemplate="Date: %{customdata}<br>Precipitation: %{y} mm<extra></extra>",
    ))
    fig.update_layout(**PLOTLY_LAYOUT, showlegend=True, height=height)
    fig.update_yaxes(title_text="Precipitation (mm)", rangemode="tozero")
    return fig
