"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"
    STANDARD = "standard"  # Kelvin


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    units: UnitSystem = UnitSystem.METRIC
    lang: str = "en"


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    credential_file: str = "weather_config.json"
    favorites_file: str = "favorite_cities.json"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_days: int = Field(default=5, ge=1, le=5)
    timezone: str | None = None  # IANA name; None means local time

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v!r}") from e
        return v


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    storage: StorageConfig = StorageConfig()
    display: DisplayConfig = DisplayConfig()
