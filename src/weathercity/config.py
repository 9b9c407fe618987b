"""Configuration for the current-city store."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from weathercity.exceptions import WeatherCityConfigError

DEFAULT_PREFERENCES_NAME = "weather_current_city"
DEFAULT_CITY_KEY = "city"
DEFAULT_CITY = "Paris, France"


@dataclasses.dataclass(frozen=True)
class CityStoreConfig:
    """Store configuration.

    Parameters
    ----------
    preferences_name : str
        Preferences namespace holding the current city.
    city_key : str
        Key of the city value inside the namespace.
    default_city : str
        City used until a value has been persisted.  Must be non-blank.
    preferences_dir : Path or None
        Directory for JSON-file preferences.  ``None`` keeps preferences
        in memory for the lifetime of the process.
    """

    preferences_name: str = DEFAULT_PREFERENCES_NAME
    city_key: str = DEFAULT_CITY_KEY
    default_city: str = DEFAULT_CITY
    preferences_dir: Path | None = None

    def __post_init__(self) -> None:
        for field_name in ("preferences_name", "city_key", "default_city"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise WeatherCityConfigError(f"{field_name} must be a non-empty string")
        if self.preferences_dir is not None:
            # Accept str paths and "~" from overrides.
            object.__setattr__(self, "preferences_dir", Path(self.preferences_dir).expanduser())

    @classmethod
    def from_env(cls, **overrides: Any) -> CityStoreConfig:
        """Create configuration from environment variables.

        Reads ``WEATHER_CITY_PREFERENCES_NAME``, ``WEATHER_CITY_KEY``,
        ``WEATHER_CITY_DEFAULT`` and ``WEATHER_CITY_PREFERENCES_DIR``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CityStoreConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "WEATHER_CITY_PREFERENCES_NAME": "preferences_name",
            "WEATHER_CITY_KEY": "city_key",
            "WEATHER_CITY_DEFAULT": "default_city",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        dir_env = env.get("WEATHER_CITY_PREFERENCES_DIR")
        if dir_env:
            config_kwargs["preferences_dir"] = Path(dir_env).expanduser()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
