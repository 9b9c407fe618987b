"""Composition root wiring preferences and the current-city store.

A :class:`WeatherGraph` is constructed once per process (or per
dependency-injection scope) and passed to whatever needs city data.
There is no module-level instance.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from weathercity.city_edit import CityEditUserAction, create_city_edit_user_action
from weathercity.config import CityStoreConfig
from weathercity.current_city.store import CurrentCityStore
from weathercity.preferences.base import SharedPreferences
from weathercity.preferences.file import JsonFilePreferences
from weathercity.preferences.memory import InMemoryPreferences

_logger = logging.getLogger(__name__)

PreferencesFactory = Callable[[str], SharedPreferences]


class WeatherGraph:
    """Owns the long-lived collaborators of the application.

    Usage::

        graph = WeatherGraph(CityStoreConfig.from_env())
        graph.city_manager.add_listener(view)
        graph.city_manager.set_city("Tokyo, Japan")
    """

    def __init__(
        self,
        config: CityStoreConfig | None = None,
        *,
        preferences_factory: PreferencesFactory | None = None,
    ) -> None:
        self._config = config or CityStoreConfig()
        self._preferences_factory = preferences_factory or self._default_preferences_factory
        self._preferences: dict[str, SharedPreferences] = {}
        self._city_manager: CurrentCityStore | None = None
        self._lock = threading.Lock()

    @property
    def config(self) -> CityStoreConfig:
        return self._config

    def preferences(self, name: str) -> SharedPreferences:
        """Return the preferences for namespace *name*, one instance per graph."""
        with self._lock:
            return self._preferences_locked(name)

    @property
    def city_manager(self) -> CurrentCityStore:
        with self._lock:
            if self._city_manager is None:
                self._city_manager = CurrentCityStore(
                    self._preferences_locked(self._config.preferences_name),
                    key=self._config.city_key,
                    default_city=self._config.default_city,
                )
            return self._city_manager

    def create_city_edit_user_action(self, *, preview: bool = False) -> CityEditUserAction:
        return create_city_edit_user_action(self, preview=preview)

    def _preferences_locked(self, name: str) -> SharedPreferences:
        preferences = self._preferences.get(name)
        if preferences is None:
            preferences = self._preferences_factory(name)
            self._preferences[name] = preferences
        return preferences

    def _default_preferences_factory(self, name: str) -> SharedPreferences:
        directory = self._config.preferences_dir
        if directory is None:
            _logger.debug("Using in-memory preferences for %r", name)
            return InMemoryPreferences(name)
        _logger.debug("Using JSON preferences for %r in %s", name, directory)
        return JsonFilePreferences(directory, name)
