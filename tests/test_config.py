"""
test_config.py — Tests for config loading and validation.

We write a temporary TOML file in each test so we don't depend on
a real config.toml existing in the project.
"""

import pytest
from weather_insights.config import DEFAULTS, default_config, load_config
from weather_insights.weather import OPEN_METEO_URL


VALID_TOML = """
[location]
latitude = 51.5074
longitude = -0.1278
name = "London"

[range]
default_days = 13

[api]
url = "https://archive-api.open-meteo.com/v1/archive"
timeout = 30

[log]
path = "logs/custom.log"
"""


def test_load_valid_config(tmp_path):
    """A valid config file should load without error."""
    config_file = tmp_path / "config.toml"
    config_file.write_text(VALID_TOML)

    config = load_config(config_file)

    assert config["location"]["name"] == "London"
    assert config["location"]["latitude"] == pytest.approx(51.5074)
    assert config["range"]["default_days"] == 13
    assert config["api"]["timeout"] == 30
    assert config["log"]["path"] == "logs/custom.log"


def test_optional_sections_fall_back_to_defaults(tmp_path):
    """Only [location] is required; the rest come from DEFAULTS."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("[location]\nlatitude = 1.0\nlongitude = 2.0\nname = 'X'\n")

    config = load_config(config_file)

    assert config["range"]["default_days"] == 6
    assert config["api"]["url"] == OPEN_METEO_URL
    assert config["api"]["timeout"] == DEFAULTS["api"]["timeout"]


def test_partial_section_is_merged_with_defaults(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        "[location]\nlatitude = 1.0\nlongitude = 2.0\nname = 'X'\n\n[api]\ntimeout = 3\n"
    )

    config = load_config(config_file)

    assert config["api"]["timeout"] == 3
    assert config["api"]["url"] == OPEN_METEO_URL


def test_missing_file_raises(tmp_path):
    """A missing config file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.toml")


def test_missing_section_raises(tmp_path):
    """A config without [location] should raise ValueError."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("[range]\ndefault_days = 3\n")

    with pytest.raises(ValueError, match="Missing required config section"):
        load_config(config_file)


def test_missing_key_raises(tmp_path):
    """A config missing a required key inside [location] should raise ValueError."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("[location]\nlatitude = 1.0\nlongitude = 2.0\n")

    with pytest.raises(ValueError, match="name"):
        load_config(config_file)


def test_non_numeric_latitude_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[location]\nlatitude = 'north'\nlongitude = 2.0\nname = 'X'\n")

    with pytest.raises(ValueError, match="latitude must be a number"):
        load_config(config_file)


def test_out_of_range_longitude_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[location]\nlatitude = 1.0\nlongitude = 200.0\nname = 'X'\n")

    with pytest.raises(ValueError, match="longitude must be between"):
        load_config(config_file)


def test_negative_default_days_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        "[location]\nlatitude = 1.0\nlongitude = 2.0\nname = 'X'\n\n[range]\ndefault_days = -1\n"
    )

    with pytest.raises(ValueError, match="default_days"):
        load_config(config_file)


def test_zero_timeout_raises(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        "[location]\nlatitude = 1.0\nlongitude = 2.0\nname = 'X'\n\n[api]\ntimeout = 0\n"
    )

    with pytest.raises(ValueError, match="timeout"):
        load_config(config_file)


def test_default_config_is_abuja():
    config = default_config()
    assert config["location"]["latitude"] == pytest.approx(9.0765)
    assert config["location"]["longitude"] == pytest.approx(7.3986)


def test_default_config_returns_independent_copy():
    config = default_config()
    config["location"]["name"] = "Changed"
    assert DEFAULTS["location"]["name"] == "Abuja, Nigeria"
