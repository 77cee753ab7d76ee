"""Process-wide state: config, stores, loaded credential and favorites."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import tzinfo
from zoneinfo import ZoneInfo

from weathercli.config.schema import AppConfig
from weathercli.ingest.forecast_aggregator import group_by_day
from weathercli.ingest.openweather_client import InvalidCredential, OpenWeatherClient
from weathercli.models.weather import Credential
from weathercli.reporting.formatters import format_current, format_forecast
from weathercli.storage.credential_store import CredentialStore
from weathercli.storage.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], OpenWeatherClient]


@dataclass
class Session:
    config: AppConfig
    credentials: CredentialStore
    favorites_store: FavoritesStore
    credential: Credential | None = None
    client_factory: ClientFactory | None = field(default=None, repr=False)

    @classmethod
    def open(cls, config: AppConfig, **kwargs) -> "Session":
        """Build stores from config and load both files once."""
        credentials = CredentialStore(config.storage.credential_file)
        favorites_store = FavoritesStore(config.storage.favorites_file)
        favorites_store.load()
        session = cls(
            config=config,
            credentials=credentials,
            favorites_store=favorites_store,
            credential=credentials.load(),
            **kwargs,
        )
        logger.debug(
            "Session opened: credential=%s favorites=%d",
            "set" if session.credential else "missing",
            len(session.favorites),
        )
        return session

    @property
    def favorites(self) -> list[str]:
        return self.favorites_store.cities

    @property
    def display_tz(self) -> tzinfo | None:
        name = self.config.display.timezone
        return ZoneInfo(name) if name else None

    def save_credential(self, api_key: str) -> Credential:
        self.credential = self.credentials.save(api_key)
        return self.credential

    def open_client(self) -> OpenWeatherClient:
        if self.credential is None:
            raise InvalidCredential("No API key configured. Run setup first.")
        if self.client_factory is not None:
            return self.client_factory(self.credential.api_key)
        return OpenWeatherClient.from_config(self.credential.api_key, self.config.api)

    async def current_text(self, city: str) -> str:
        async with self.open_client() as client:
            report = await client.fetch_current(city)
        return format_current(report, self.config.api.units, self.display_tz)

    async def forecast_text(self, city: str) -> str:
        days = self.config.display.forecast_days
        async with self.open_client() as client:
            entries = await client.fetch_forecast(city)
        buckets = group_by_day(entries, self.display_tz, max_days=days)
        return format_forecast(buckets, self.config.api.units, max_days=days)
