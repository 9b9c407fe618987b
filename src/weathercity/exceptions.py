"""Custom exception hierarchy for weathercity."""

from __future__ import annotations

from pathlib import Path


class WeatherCityError(Exception):
    """Base exception for all weathercity errors."""


class WeatherCityConfigError(WeatherCityError):
    """Invalid or missing configuration."""


class PreferencesError(WeatherCityError):
    """Durable key-value storage failure."""


class PreferencesWriteError(PreferencesError):
    """Pending preference changes could not be persisted.

    Raised by :meth:`PreferencesEditor.apply` when the backend fails to
    write.  ``path`` is set for file-backed preferences.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
