"""Current-city layer.

This package is the single source of truth for the city the application
shows weather for.
"""

from weathercity.current_city.listener import CurrentCityListener
from weathercity.current_city.store import CurrentCityStore

__all__ = ["CurrentCityListener", "CurrentCityStore"]
