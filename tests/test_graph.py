from __future__ import annotations

from pathlib import Path

from weathercity import (
    CityEditPresenter,
    CityStoreConfig,
    InMemoryPreferences,
    JsonFilePreferences,
    PreviewCityEditUserAction,
    WeatherGraph,
)


class _Listener:
    def __init__(self) -> None:
        self.calls = 0

    def on_city_changed(self) -> None:
        self.calls += 1


def test_graph_returns_same_store_instance() -> None:
    graph = WeatherGraph()

    assert graph.city_manager is graph.city_manager
    assert isinstance(graph.preferences("weather_current_city"), InMemoryPreferences)
    assert graph.preferences("weather_current_city") is graph.preferences("weather_current_city")


def test_separate_graphs_do_not_share_state() -> None:
    first, second = WeatherGraph(), WeatherGraph()

    first.city_manager.set_city("Tokyo, Japan")

    assert second.city_manager.get_city() == "Paris, France"


def test_graph_uses_json_preferences_when_directory_configured(tmp_path: Path) -> None:
    config = CityStoreConfig(preferences_dir=tmp_path, default_city="Lyon, France")
    graph = WeatherGraph(config)

    assert isinstance(graph.preferences(config.preferences_name), JsonFilePreferences)
    assert graph.city_manager.get_city() == "Lyon, France"

    graph.city_manager.set_city("Nantes, France")
    assert WeatherGraph(config).city_manager.get_city() == "Nantes, France"


def test_custom_preferences_factory() -> None:
    seeded = InMemoryPreferences("weather_current_city", {"city": "Tokyo, Japan"})
    graph = WeatherGraph(preferences_factory=lambda name: seeded)

    assert graph.city_manager.get_city() == "Tokyo, Japan"


def test_city_edit_presenter_forwards_text_verbatim() -> None:
    graph = WeatherGraph()
    listener = _Listener()
    graph.city_manager.add_listener(listener)

    action = graph.create_city_edit_user_action()
    assert isinstance(action, CityEditPresenter)

    action.on_city_validated("  new york ")
    action.on_info_clicked()

    assert graph.city_manager.get_city() == "  new york "
    assert listener.calls == 1


def test_preview_user_action_does_not_touch_store() -> None:
    graph = WeatherGraph()

    action = graph.create_city_edit_user_action(preview=True)
    assert isinstance(action, PreviewCityEditUserAction)
    action.on_city_validated("Tokyo, Japan")
    action.on_info_clicked()

    assert not graph.city_manager.loaded
    assert graph.city_manager.get_city() == "Paris, France"
