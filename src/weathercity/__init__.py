"""weathercity - Persisted current-city state for weather display apps."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weathercity")
except PackageNotFoundError:
    __version__ = "0+local"
from weathercity.city_edit import (
    CityEditPresenter,
    CityEditUserAction,
    PreviewCityEditUserAction,
    create_city_edit_user_action,
)
from weathercity.config import CityStoreConfig
from weathercity.current_city import CurrentCityListener, CurrentCityStore
from weathercity.exceptions import (
    PreferencesError,
    PreferencesWriteError,
    WeatherCityConfigError,
    WeatherCityError,
)
from weathercity.graph import WeatherGraph
from weathercity.preferences import (
    InMemoryPreferences,
    JsonFilePreferences,
    PreferencesDocument,
    PreferencesEditor,
    SharedPreferences,
)

__all__ = [
    "__version__",
    "CityEditPresenter",
    "CityEditUserAction",
    "CityStoreConfig",
    "CurrentCityListener",
    "CurrentCityStore",
    "InMemoryPreferences",
    "JsonFilePreferences",
    "PreferencesDocument",
    "PreferencesEditor",
    "PreferencesError",
    "PreferencesWriteError",
    "SharedPreferences",
    "WeatherCityConfigError",
    "WeatherCityError",
    "WeatherGraph",
    "create_city_edit_user_action",
]
