"""Observer interface for current-city changes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CurrentCityListener(Protocol):
    """Told that the current city changed.

    No payload is passed; implementations call
    :meth:`CurrentCityStore.get_city` to learn the new value.
    """

    def on_city_changed(self) -> None: ...
