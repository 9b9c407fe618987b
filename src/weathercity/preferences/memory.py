"""Volatile preferences backend."""

from __future__ import annotations

from collections.abc import Mapping

from weathercity.preferences.base import SharedPreferences


class InMemoryPreferences(SharedPreferences):
    """Preferences kept in a dict for the lifetime of the instance.

    Used for previews, tests and configurations without a preferences
    directory.
    """

    def __init__(self, name: str, initial: Mapping[str, str] | None = None) -> None:
        super().__init__(name)
        self._data: dict[str, str] = dict(initial or {})

    def _values(self) -> dict[str, str]:
        return self._data

    def _write(self, values: dict[str, str]) -> None:
        self._data = values
