from __future__ import annotations

from pathlib import Path

import pytest

from weathercity.config import CityStoreConfig
from weathercity.exceptions import WeatherCityConfigError

_ENV_KEYS = (
    "WEATHER_CITY_PREFERENCES_NAME",
    "WEATHER_CITY_KEY",
    "WEATHER_CITY_DEFAULT",
    "WEATHER_CITY_PREFERENCES_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = CityStoreConfig()

    assert config.preferences_name == "weather_current_city"
    assert config.city_key == "city"
    assert config.default_city == "Paris, France"
    assert config.preferences_dir is None


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WEATHER_CITY_DEFAULT", "Tokyo, Japan")
    monkeypatch.setenv("WEATHER_CITY_KEY", "current")
    monkeypatch.setenv("WEATHER_CITY_PREFERENCES_DIR", str(tmp_path))

    config = CityStoreConfig.from_env()

    assert config.default_city == "Tokyo, Japan"
    assert config.city_key == "current"
    assert config.preferences_dir == tmp_path


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_CITY_DEFAULT", "Tokyo, Japan")

    config = CityStoreConfig.from_env(default_city="Seoul, Korea", preferences_dir="/tmp/prefs")

    assert config.default_city == "Seoul, Korea"
    assert config.preferences_dir == Path("/tmp/prefs")


@pytest.mark.parametrize("field_name", ["preferences_name", "city_key", "default_city"])
def test_blank_fields_rejected(field_name: str) -> None:
    with pytest.raises(WeatherCityConfigError):
        CityStoreConfig(**{field_name: "   "})


def test_home_relative_dir_expanded_for_str_and_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    assert CityStoreConfig(preferences_dir="~/.weathercity").preferences_dir == tmp_path / ".weathercity"
    assert CityStoreConfig(preferences_dir=Path("~/.weathercity")).preferences_dir == tmp_path / ".weathercity"
