"""Weather report, forecast and credential models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Credential:
    api_key: str
    setup_date: str  # ISO-8601


@dataclass(frozen=True)
class CurrentWeatherReport:
    city: str
    country: str
    temperature: float
    feels_like: float
    description: str
    humidity: int
    wind_speed: float
    pressure: int
    visibility_m: int | None
    sunrise: int  # epoch seconds
    sunset: int  # epoch seconds
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class ForecastEntry:
    dt: int  # epoch seconds
    temperature: float
    description: str
    humidity: int
    wind_speed: float


@dataclass
class DailyForecastBucket:
    """Forecast samples that share a calendar date.

    Description, humidity and wind come from the first sample of the day.
    """

    date_key: str
    description: str
    humidity: int
    wind_speed: float
    temperatures: list[float] = field(default_factory=list)

    @property
    def min_temp(self) -> float:
        return min(self.temperatures)

    @property
    def max_temp(self) -> float:
        return max(self.temperatures)
