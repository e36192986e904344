# Project: weather-insights
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
test_app.py — Tests for the Streamlit dashboard in app/app.py.

The script runs under streamlit's AppTest harness with requests.get patched
to return a fake Open-Meteo payload — no network calls.
"""

import json
from datetime import date, timedelta
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).parent.parent / "app" / "app.py"


class FakeResponse:
    status_code = 200
    reason = "OK"
    ok = True

    def __init__(self, body: dict):
        self._text = json.dumps(body)

    def json(self):
        return json.loads(self._text)


def _payload(start: str, end: str) -> dict:
    first = date.fromisoformat(start)
    n = (date.fromisoformat(end) - first).days + 1
    return {
        "daily": {
            "time": [(first + timedelta(days=i)).isoformat() for i in range(n)],
            "temperature_2m_max": [30.0] * n,
            "temperature_2m_min": [20.0] * n,
            "precipitation_sum": [1.0] * n,
        }
    }


@pytest.fixture()
def fetches(tmp_path, monkeypatch):
    """Run from an empty directory and record every request the app makes."""
    monkeypatch.chdir(tmp_path)
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append(params)
        return FakeResponse(_payload(params["start_date"], params["end_date"]))

    monkeypatch.setattr("weather_insights.weather.requests.get", fake_get)
    return calls


def _markdown_text(at: AppTest) -> str:
    return "\n".join(m.value for m in at.markdown)


def _run_app() -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_first_render_fetches_default_range(fetches):
    at = _run_app()

    assert len(fetches) == 1
    assert fetches[0]["end_date"] == date.today().isoformat()
    assert fetches[0]["start_date"] == (date.today() - timedelta(days=6)).isoformat()
    assert len(at.session_state["controller"].records) == 7


def test_rerun_without_changes_does_not_refetch(fetches):
    at = _run_app()
    at.run()
    assert len(fetches) == 1


def test_reversed_dates_show_range_error_without_fetching(fetches):
    at = _run_app()

    at.date_input(key="start_date").set_value(date(2024, 3, 10))
    at.date_input(key="end_date").set_value(date(2024, 3, 1))
    at.run()

    assert not at.exception
    assert len(fetches) == 1
    assert "Start date cannot be after end date." in _markdown_text(at)


def test_editing_dates_refetches_and_clears_range_error(fetches):
    at = _run_app()

    at.date_input(key="start_date").set_value(date(2024, 3, 10))
    at.date_input(key="end_date").set_value(date(2024, 3, 1))
    at.run()
    at.date_input(key="start_date").set_value(date(2024, 3, 1))
    at.date_input(key="end_date").set_value(date(2024, 3, 10))
    at.run()

    assert not at.exception
    assert len(fetches) == 2
    assert fetches[-1]["start_date"] == "2024-03-01"
    assert fetches[-1]["end_date"] == "2024-03-10"
    assert "Start date cannot be after end date." not in _markdown_text(at)
    assert len(at.session_state["controller"].records) == 10
