#!/usr/bin/env python3
"""Read or change the persisted current city.

Examples::

    python scripts/current_city.py --dir ~/.weathercity get
    python scripts/current_city.py --dir ~/.weathercity set "Tokyo, Japan"

Without ``--dir`` the directory comes from ``WEATHER_CITY_PREFERENCES_DIR``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from weathercity import CityStoreConfig, WeatherCityError, WeatherGraph  # noqa: E402


class _PrintingListener:
    def __init__(self, graph: WeatherGraph) -> None:
        self._graph = graph

    def on_city_changed(self) -> None:
        print(f"Current city changed to: {self._graph.city_manager.get_city()}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Read or change the persisted current city.")
    parser.add_argument("--dir", dest="directory", help="Preferences directory (default: $WEATHER_CITY_PREFERENCES_DIR)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("get", help="Print the current city")
    set_parser = sub.add_parser("set", help="Change the current city")
    set_parser.add_argument("city", help="New city name, e.g. 'Tokyo, Japan'")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    overrides = {}
    if args.directory:
        overrides["preferences_dir"] = Path(args.directory).expanduser()
    try:
        config = CityStoreConfig.from_env(**overrides)
    except WeatherCityError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2
    if config.preferences_dir is None:
        print("No preferences directory; pass --dir or set WEATHER_CITY_PREFERENCES_DIR", file=sys.stderr)
        return 2

    graph = WeatherGraph(config)
    manager = graph.city_manager
    if args.command == "get":
        print(manager.get_city())
        return 0

    manager.add_listener(_PrintingListener(graph))
    try:
        manager.set_city(args.city)
    except WeatherCityError as exc:
        print(f"Could not save city: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
