"""CLI entry point for the weather client."""

import argparse
import asyncio
import logging

from pydantic import ValidationError

from weathercli.config.loader import DEFAULT_CONFIG, get_config_value, load_config
from weathercli.ingest.openweather_client import WeatherClientError
from weathercli.menu import MenuController
from weathercli.reporting.formatters import format_favorites
from weathercli.session import Session
from weathercli.storage.favorites_store import FavoriteOutcome
from weathercli.storage.json_file import StorageWriteFailed

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weathercli",
        description="Current weather and 5-day forecasts from OpenWeatherMap",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (default WARNING)"
    )

    sub = parser.add_subparsers(dest="command")

    # menu (default)
    sub.add_parser("menu", help="Interactive menu")

    # current / forecast
    current_p = sub.add_parser("current", help="Show current weather")
    current_p.add_argument("city")
    forecast_p = sub.add_parser("forecast", help="Show the 5-day forecast")
    forecast_p.add_argument("city")

    # favorites list / add / remove
    fav_p = sub.add_parser("favorites", help="Favorite city operations")
    fav_sub = fav_p.add_subparsers(dest="favorites_command")
    fav_sub.add_parser("list", help="List favorite cities")
    add_p = fav_sub.add_parser("add", help="Add a favorite city")
    add_p.add_argument("city")
    remove_p = fav_sub.add_parser("remove", help="Remove a favorite city")
    remove_p.add_argument("city")

    # setup
    setup_p = sub.add_parser("setup", help="Set or change the API key")
    setup_p.add_argument("--api-key", help="Key to save (prompted if omitted)")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display effective config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. api.units")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.command == "config":
            return _cmd_config(config, args)

        session = Session.open(config)
        if args.command in (None, "menu"):
            asyncio.run(MenuController(session).run())
            return 0
        elif args.command == "current":
            return _cmd_fetch(session.current_text(args.city))
        elif args.command == "forecast":
            return _cmd_fetch(session.forecast_text(args.city))
        elif args.command == "favorites":
            return _cmd_favorites(session, args)
        elif args.command == "setup":
            return _cmd_setup(session, args)
        else:
            parser.print_help()
            return 1
    except (WeatherClientError, StorageWriteFailed) as e:
        print(f"Error: {e}")
        return 1
    except ValidationError as e:
        print(f"Invalid config: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.")
        return 1


def _cmd_fetch(coro) -> int:
    text = asyncio.run(coro)
    print(text)
    return 0


def _cmd_favorites(session: Session, args) -> int:
    store = session.favorites_store
    if args.favorites_command == "list":
        print(format_favorites(session.favorites))
        return 0
    elif args.favorites_command == "add":
        outcome = store.add(args.city)
        print(f"{args.city}: {outcome}")
        return 0
    elif args.favorites_command == "remove":
        outcome = store.remove(args.city)
        print(f"{args.city}: {outcome}")
        return 0 if outcome == FavoriteOutcome.REMOVED else 1
    else:
        print("Use: favorites list | favorites add CITY | favorites remove CITY")
        return 1


def _cmd_setup(session: Session, args) -> int:
    if args.api_key:
        session.save_credential(args.api_key.strip())
        print("API key saved.")
    else:
        MenuController(session).setup_credential()
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        if args.key:
            try:
                value = get_config_value(config, args.key)
            except KeyError as e:
                print(f"Error: {e}")
                return 1
            if hasattr(value, "model_dump_json"):
                print(value.model_dump_json(indent=2))
            else:
                print(value)
            return 0
        print(config.model_dump_json(indent=2))
        return 0
    else:
        print("Use: config show [KEY]")
        return 1
