"""OpenWeatherMap current-weather and 5 day / 3 hour forecast client."""

import logging
from typing import Any

import httpx

from weathercli.config.schema import ApiConfig, UnitSystem
from weathercli.models.weather import CurrentWeatherReport, ForecastEntry

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"


class WeatherClientError(Exception):
    """Raised when the weather API cannot serve a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CityNotFound(WeatherClientError):
    pass


class InvalidCredential(WeatherClientError):
    pass


class FetchFailed(WeatherClientError):
    pass


class OpenWeatherClient:
    """Read-only access to the `weather` and `forecast` endpoints.

    No retries and no caching; one request per call.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = OWM_BASE_URL,
        units: UnitSystem = UnitSystem.METRIC,
        lang: str = "en",
        http: httpx.AsyncClient | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang
        self._http = http or httpx.AsyncClient()

    @classmethod
    def from_config(cls, api_key: str, config: ApiConfig) -> "OpenWeatherClient":
        return cls(
            api_key,
            base_url=config.base_url,
            units=config.units,
            lang=config.lang,
        )

    async def __aenter__(self) -> "OpenWeatherClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _params(self, city: str) -> dict[str, str]:
        return {
            "q": city,
            "appid": self.api_key,
            "units": str(self.units),
            "lang": self.lang,
        }

    async def _get(self, endpoint: str, city: str) -> httpx.Response:
        url = f"{self.base_url}/{endpoint}"
        try:
            return await self._http.get(url, params=self._params(city))
        except httpx.RequestError as e:
            logger.error("Weather API request failed: GET %s -> %s", endpoint, e)
            raise FetchFailed(f"Could not reach the weather service: {e}") from e

    async def fetch_current(self, city: str) -> CurrentWeatherReport:
        """Fetch current conditions for a city."""
        resp = await self._get("weather", city)
        if resp.status_code == 404:
            raise CityNotFound(
                f"City not found: {city!r}. Check the spelling.", 404
            )
        if resp.status_code == 401:
            raise InvalidCredential(
                "The API key was rejected. Reconfigure it from the menu.", 401
            )
        if resp.status_code >= 400:
            logger.error("Weather API %d: GET weather q=%s", resp.status_code, city)
            raise FetchFailed(
                f"Failed to fetch current weather (HTTP {resp.status_code})",
                resp.status_code,
            )
        return _parse_current(_json_body(resp))

    async def fetch_forecast(self, city: str) -> list[ForecastEntry]:
        """Fetch the 3-hourly samples of the 5 day forecast.

        Every failure, whatever the status, is reported as FetchFailed.
        """
        resp = await self._get("forecast", city)
        if resp.status_code >= 400:
            logger.error("Weather API %d: GET forecast q=%s", resp.status_code, city)
            raise FetchFailed(
                f"Failed to fetch the forecast (HTTP {resp.status_code})",
                resp.status_code,
            )
        body = _json_body(resp)
        try:
            return [_parse_forecast_entry(item) for item in body["list"]]
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise FetchFailed(f"Unexpected forecast response: {e}") from e


def _json_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise FetchFailed(f"Weather API returned invalid JSON: {e}") from e


def _parse_current(raw: dict) -> CurrentWeatherReport:
    try:
        main = raw["main"]
        sun = raw["sys"]
        return CurrentWeatherReport(
            city=raw["name"],
            country=sun.get("country", ""),
            temperature=main["temp"],
            feels_like=main["feels_like"],
            description=raw["weather"][0]["description"],
            humidity=main["humidity"],
            wind_speed=raw["wind"]["speed"],
            pressure=main["pressure"],
            visibility_m=raw.get("visibility"),
            sunrise=int(sun["sunrise"]),
            sunset=int(sun["sunset"]),
            raw=raw,
        )
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise FetchFailed(f"Unexpected weather response: {e}") from e


def _parse_forecast_entry(item: dict) -> ForecastEntry:
    return ForecastEntry(
        dt=int(item["dt"]),
        temperature=item["main"]["temp"],
        description=item["weather"][0]["description"],
        humidity=item["main"]["humidity"],
        wind_speed=item["wind"]["speed"],
    )
