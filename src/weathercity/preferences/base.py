"""Storage contract shared by all preferences backends."""

from __future__ import annotations

import abc
import logging
import threading

from weathercity.exceptions import PreferencesWriteError

_logger = logging.getLogger(__name__)


class SharedPreferences(abc.ABC):
    """A named namespace of string values backed by durable storage.

    Subclasses provide the current values and a way to persist a full
    replacement mapping; reads, edits and change batching live here.
    """

    def __init__(self, name: str) -> None:
        if not name or not name.strip():
            raise ValueError("preferences name must be non-empty")
        self._name = name
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @abc.abstractmethod
    def _values(self) -> dict[str, str]:
        """Return the live mapping of persisted values."""

    @abc.abstractmethod
    def _write(self, values: dict[str, str]) -> None:
        """Persist *values* as the complete new content of the namespace."""

    def get_string(self, key: str, default: str | None = None) -> str | None:
        with self._lock:
            return self._values().get(key, default)

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._values()

    def get_all(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values())

    def edit(self) -> PreferencesEditor:
        return PreferencesEditor(self)

    def _apply_changes(self, changes: dict[str, str | None], *, clear: bool) -> None:
        with self._lock:
            values = {} if clear else dict(self._values())
            for key, value in changes.items():
                if value is None:
                    values.pop(key, None)
                else:
                    values[key] = value
            self._write(values)


class PreferencesEditor:
    """Batch of pending changes for a :class:`SharedPreferences`.

    Nothing is written until :meth:`apply` or :meth:`commit` is called.
    A ``clear()`` in the batch runs before the batch's puts and removes,
    regardless of call order.
    """

    def __init__(self, preferences: SharedPreferences) -> None:
        self._preferences = preferences
        self._changes: dict[str, str | None] = {}
        self._clear = False

    def put_string(self, key: str, value: str) -> PreferencesEditor:
        if value is None:
            raise TypeError("value must be a string; use remove() to delete a key")
        self._changes[key] = value
        return self

    def remove(self, key: str) -> PreferencesEditor:
        self._changes[key] = None
        return self

    def clear(self) -> PreferencesEditor:
        self._clear = True
        return self

    def apply(self) -> None:
        """Persist the pending changes.

        Raises
        ------
        PreferencesWriteError
            If the backend could not persist the changes.
        """
        changes, clear = self._drain()
        self._preferences._apply_changes(changes, clear=clear)  # noqa: SLF001

    def commit(self) -> bool:
        """Persist the pending changes, returning ``False`` on write failure."""
        try:
            self.apply()
        except PreferencesWriteError:
            _logger.warning("Commit to preferences %r failed", self._preferences.name, exc_info=True)
            return False
        return True

    def _drain(self) -> tuple[dict[str, str | None], bool]:
        changes, clear = self._changes, self._clear
        self._changes = {}
        self._clear = False
        return changes, clear
