"""Persisted, cached current city with change notification."""

from __future__ import annotations

import logging
import threading

from weathercity.config import DEFAULT_CITY, DEFAULT_CITY_KEY
from weathercity.current_city.listener import CurrentCityListener
from weathercity.exceptions import PreferencesWriteError
from weathercity.preferences.base import SharedPreferences

_logger = logging.getLogger(__name__)


class CurrentCityStore:
    """Current city backed by a :class:`SharedPreferences` namespace.

    The persisted value is read once, on the first ``get_city`` or
    ``set_city``, and cached for the lifetime of the store.  When nothing
    has been persisted yet the store reports *default_city*.

    Listeners are unique by identity and are notified synchronously,
    outside the store lock, after every effective change.
    """

    def __init__(
        self,
        preferences: SharedPreferences,
        *,
        key: str = DEFAULT_CITY_KEY,
        default_city: str = DEFAULT_CITY,
    ) -> None:
        self._preferences = preferences
        self._key = key
        self._city = default_city
        self._loaded = False
        self._listeners: list[CurrentCityListener] = []
        self._lock = threading.RLock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get_city(self) -> str:
        with self._lock:
            self._load_if_needed()
            return self._city

    def set_city(self, city: str) -> None:
        """Make *city* the current city.

        Setting the value already held is a no-op: nothing is written and
        no listener is notified.
        """
        with self._lock:
            self._load_if_needed()
            if self._city == city:
                return
            previous = self._city
            self._city = city
            try:
                self._save()
            except PreferencesWriteError:
                self._city = previous
                raise
            listeners = list(self._listeners)

        _logger.debug("Current city changed %r -> %r; notifying %d listener(s)", previous, city, len(listeners))
        for listener in listeners:
            listener.on_city_changed()

    def add_listener(self, listener: CurrentCityListener) -> None:
        with self._lock:
            if any(existing is listener for existing in self._listeners):
                return
            self._listeners.append(listener)

    def remove_listener(self, listener: CurrentCityListener) -> None:
        with self._lock:
            self._listeners = [existing for existing in self._listeners if existing is not listener]

    def _load_if_needed(self) -> None:
        if self._loaded:
            return
        stored = self._preferences.get_string(self._key)
        if stored is None:
            _logger.debug("No persisted city in %r; using default %r", self._preferences.name, self._city)
        else:
            self._city = stored
            _logger.debug("Loaded current city %r from %r", stored, self._preferences.name)
        self._loaded = True

    def _save(self) -> None:
        self._preferences.edit().put_string(self._key, self._city).apply()
