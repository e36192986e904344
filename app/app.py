# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit dashboard for historical daily temperature and precipitation.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import streamlit as st

from weather_insights.config import default_config, load_config
from weather_insights.controller import WeatherDataController
from weather_insights.dates import default_range, is_valid_range, parse_date
from weather_insights.dates import today as today_iso
from weather_insights.figures import precipitation_figure, temperature_figure
from weather_insights.weather import fetch_weather


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Insights",
    page_icon="🌦",
    layout="wide",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  #MainMenu, footer { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 3rem; max-width: 1200px; }

  .wi-header { text-align: center; margin-bottom: 2rem; }
  .wi-title { font-size: 3rem; font-weight: 800; color: #1a202c; line-height: 1.1; }
  .wi-subtitle { font-size: 1.2rem; color: #4a5568; font-weight: 500; margin-top: 0.5rem; }
  .wi-tagline { font-size: 0.95rem; color: #718096; margin-top: 0.25rem; }

  .card-title { font-size: 1.4rem; font-weight: 700; color: #2d3748; text-align: center; margin-bottom: 1rem; }

  .range-error { color: #e53e3e; font-size: 0.9rem; font-weight: 500; margin-top: 0.5rem; }

  .error-card {
    color: #e53e3e;
    text-align: center;
    padding: 24px;
    border: 1px solid #feb2b2;
    background: #fff5f5;
    border-radius: 8px;
    margin: 2rem auto;
    max-width: 360px;
  }
  .error-card .error-title { font-weight: 700; font-size: 1.1rem; margin-bottom: 0.5rem; }
  .error-card .error-hint { font-size: 0.85rem; margin-top: 0.5rem; }

  .wi-footer {
    text-align: center;
    color: #a0aec0;
    font-size: 0.8rem;
    padding: 3rem 0 1rem;
    border-top: 1px solid #e2e8f0;
    margin-top: 3rem;
  }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────────────────────

try:
    config = load_config()
except FileNotFoundError:
    config = default_config()

location = config["location"]
api = config["api"]


def _fetch(latitude: float, longitude: float, start_date: str, end_date: str) -> list[dict]:
    return fetch_weather(latitude, longitude, start_date, end_date, url=api["url"], timeout=api["timeout"])


# ─────────────────────────────────────────────────────────────
# Session state initialisation
# ─────────────────────────────────────────────────────────────

if "controller" not in st.session_state:
    st.session_state.controller = WeatherDataController(
        fetcher=_fetch,
        log_path=Path(config["log"]["path"]),
    )
if "start_date" not in st.session_state or "end_date" not in st.session_state:
    start_str, end_str = default_range(config["range"]["default_days"])
    st.session_state.start_date = parse_date(start_str)
    st.session_state.end_date = parse_date(end_str)
if "applied_range" not in st.session_state:
    st.session_state.applied_range = None  # (start, end) last passed to apply_filter

controller: WeatherDataController = st.session_state.controller


def apply_filter(start_date: str, end_date: str) -> None:
    """Validate the selected range and fetch it."""
    st.session_state.applied_range = (start_date, end_date)
    with st.spinner("Loading data..."):
        controller.apply_filter(location["latitude"], location["longitude"], start_date, end_date)


# ─────────────────────────────────────────────────────────────
# Header
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wi-header">'
    '<div class="wi-title">Weather Insights Dashboard</div>'
    f'<div class="wi-subtitle">Historical daily weather for {location["name"]}</div>'
    '<div class="wi-tagline">Explore temperature and precipitation trends over your selected period.</div>'
    '</div>',
    unsafe_allow_html=True,
)


# ─────────────────────────────────────────────────────────────
# Date range selection
# ─────────────────────────────────────────────────────────────

today = parse_date(today_iso())

with st.container(border=True):
    col_start, col_end, col_btn = st.columns([2, 2, 1], vertical_alignment="bottom")
    with col_start:
        st.date_input("Start Date:", key="start_date", max_value=today)
    with col_end:
        st.date_input("End Date:", key="end_date", max_value=today)
    with col_btn:
        apply_clicked = st.button(
            "Apply Filter",
            type="primary",
            use_container_width=True,
            disabled=not is_valid_range(st.session_state.start_date, st.session_state.end_date),
        )

    # Refetch on first render, on every date edit, and on Apply
    selected_range = (st.session_state.start_date.isoformat(), st.session_state.end_date.isoformat())
    if apply_clicked or selected_range != st.session_state.applied_range:
        apply_filter(*selected_range)

    if controller.range_error:
        st.markdown(f'<div class="range-error">{controller.range_error}</div>', unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Charts
# ─────────────────────────────────────────────────────────────

def chart_card(title: str, build_figure) -> None:
    """Render one chart card: error panel or the chart.

    load() runs synchronously under st.spinner, so the controller is never
    mid-load while the cards render.
    """
    with st.container(border=True):
        st.markdown(f'<div class="card-title">{title}</div>', unsafe_allow_html=True)
        if controller.error_message:
            st.markdown(
                '<div class="error-card">'
                '<div class="error-title">Error:</div>'
                f'<div>{controller.error_message}</div>'
                '<div class="error-hint">Please try again or adjust the date range.</div>'
                '</div>',
                unsafe_allow_html=True,
            )
        elif controller.records:
            st.plotly_chart(
                build_figure(controller.records),
                use_container_width=True,
                config={"displayModeBar": False},
            )


chart_left, chart_right = st.columns(2)
with chart_left:
    chart_card("Daily Temperature Trend", temperature_figure)
with chart_right:
    chart_card("Daily Precipitation", precipitation_figure)


# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wi-footer">'
    'Data provided by <a href="https://open-meteo.com" style="color:#3182ce;text-decoration:none;">Open-Meteo</a>'
    ' &nbsp;·&nbsp; Built with Streamlit and Plotly'
    f'<div style="margin-top:0.25rem">&copy; {today.year} GreenUnicorn</div>'
    '</div>',
    unsafe_allow_html=True,
)
