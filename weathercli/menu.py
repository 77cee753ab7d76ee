"""Interactive numbered menu over the weather, favorites and setup commands.

Each command runs to completion before the next prompt. Command failures
are reported on one line and the menu is shown again; only "7" exits.
"""

import logging
from collections.abc import Awaitable, Callable

from weathercli.ingest.openweather_client import WeatherClientError
from weathercli.reporting.formatters import format_favorites
from weathercli.session import Session
from weathercli.storage.favorites_store import FavoriteOutcome
from weathercli.storage.json_file import StorageWriteFailed

logger = logging.getLogger(__name__)

API_KEY_URL = "https://openweathermap.org/api"
EXIT_CHOICE = "7"

MENU = """
--- Menu ---
1. Current weather
2. 5-day forecast
3. Show favorite cities
4. Add a favorite city
5. Remove a favorite city
6. Change API key
7. Quit"""


class MenuController:
    def __init__(
        self,
        session: Session,
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ):
        self.session = session
        self._input = input_fn or input
        self._out = output or print
        self._commands: dict[str, Callable[[], Awaitable[None]]] = {
            "1": self.current_weather,
            "2": self.forecast,
            "3": self.show_favorites,
            "4": self.add_favorite,
            "5": self.remove_favorite,
            "6": self.reconfigure,
        }

    async def run(self) -> None:
        self._out("Welcome to the weather forecast app!")
        if self.session.credential is None:
            self.setup_credential()

        while True:
            self._out(MENU)
            try:
                choice = self._input("Choose an option (1-7): ").strip()
            except (EOFError, KeyboardInterrupt):
                logger.info("Console closed, leaving menu")
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                self._out("Goodbye!")
                return

            command = self._commands.get(choice)
            if command is None:
                self._out("Invalid choice. Enter a number from 1 to 7.")
                continue

            try:
                await command()
            except (WeatherClientError, StorageWriteFailed) as e:
                logger.debug("Command %s failed", choice, exc_info=True)
                self._out(f"Error: {e}")
            except Exception as e:
                logger.exception("Unexpected failure in command %s", choice)
                self._out(f"Error: {e}")

    def setup_credential(self) -> None:
        """Prompt until a non-empty API key is entered, then save it."""
        self._out("OpenWeatherMap API setup")
        self._out(f"Get an API key at: {API_KEY_URL}")
        self._out("A free account is enough.")
        api_key = ""
        while not api_key:
            api_key = self._input("Enter your API key: ").strip()
        self.session.save_credential(api_key)
        self._out("API key saved.")

    def _ask_city(self) -> str:
        self._out(format_favorites(self.session.favorites))
        return self._input("City name (e.g. Tokyo, London, New York): ").strip()

    async def current_weather(self) -> None:
        city = self._ask_city()
        if not city:
            return
        self._out("Fetching current weather...")
        self._out(await self.session.current_text(city))

    async def forecast(self) -> None:
        city = self._ask_city()
        if not city:
            return
        self._out("Fetching forecast...")
        self._out(await self.session.forecast_text(city))

    async def show_favorites(self) -> None:
        self._out(format_favorites(self.session.favorites))

    async def add_favorite(self) -> None:
        city = self._input("City to add to favorites: ").strip()
        if not city:
            return
        outcome = self.session.favorites_store.add(city)
        if outcome == FavoriteOutcome.ADDED:
            self._out(f'Added "{city}" to favorites.')
        else:
            self._out(f'"{city}" is already a favorite.')

    async def remove_favorite(self) -> None:
        self._out(format_favorites(self.session.favorites))
        if not self.session.favorites:
            return
        city = self._input("City to remove: ").strip()
        if not city:
            return
        outcome = self.session.favorites_store.remove(city)
        if outcome == FavoriteOutcome.REMOVED:
            self._out(f'Removed "{city}" from favorites.')
        else:
            self._out(f'"{city}" is not in favorites.')

    async def reconfigure(self) -> None:
        self.setup_credential()
