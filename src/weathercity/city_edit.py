"""User actions behind the city input view."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from weathercity.current_city.store import CurrentCityStore

if TYPE_CHECKING:
    from weathercity.graph import WeatherGraph

_logger = logging.getLogger(__name__)


class CityEditUserAction(Protocol):
    def on_city_validated(self, text: str) -> None: ...

    def on_info_clicked(self) -> None: ...


class CityEditPresenter:
    """Forwards the city typed by the user to the current-city store.

    The text is passed through verbatim; city names are free-form.
    """

    def __init__(self, city_manager: CurrentCityStore) -> None:
        self._city_manager = city_manager

    def on_city_validated(self, text: str) -> None:
        _logger.debug("City validated from input: %r", text)
        self._city_manager.set_city(text)

    def on_info_clicked(self) -> None:
        _logger.debug("Info requested from city input")


class PreviewCityEditUserAction:
    """No-op actions for views rendered in preview mode."""

    def on_city_validated(self, text: str) -> None:
        pass

    def on_info_clicked(self) -> None:
        pass


def create_city_edit_user_action(graph: WeatherGraph, *, preview: bool = False) -> CityEditUserAction:
    # Previews must not touch (or create) persisted state.
    if preview:
        return PreviewCityEditUserAction()
    return CityEditPresenter(graph.city_manager)
