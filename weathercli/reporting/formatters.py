"""Plain text blocks for current weather, forecasts and favorites."""

from datetime import datetime, tzinfo

from weathercli.config.schema import UnitSystem
from weathercli.models.weather import CurrentWeatherReport, DailyForecastBucket

RULE = "━" * 32
FORECAST_TITLE = "5-day forecast"

_TEMP_UNITS = {
    UnitSystem.METRIC: "°C",
    UnitSystem.IMPERIAL: "°F",
    UnitSystem.STANDARD: "K",
}
_SPEED_UNITS = {
    UnitSystem.METRIC: "m/s",
    UnitSystem.IMPERIAL: "mph",
    UnitSystem.STANDARD: "m/s",
}


def _time_of_day(epoch: int, tz: tzinfo | None) -> str:
    return datetime.fromtimestamp(epoch, tz).strftime("%H:%M:%S")


def format_current(
    r: CurrentWeatherReport,
    units: UnitSystem = UnitSystem.METRIC,
    tz: tzinfo | None = None,
) -> str:
    t, v = _TEMP_UNITS[units], _SPEED_UNITS[units]
    lines = [
        "",
        "Current weather",
        RULE,
        f"City:        {r.city}, {r.country}",
        f"Temperature: {r.temperature}{t} (feels like {r.feels_like}{t})",
        f"Conditions:  {r.description}",
        f"Humidity:    {r.humidity}%",
        f"Wind:        {r.wind_speed} {v}",
        f"Pressure:    {r.pressure} hPa",
    ]
    if r.visibility_m:
        lines.append(f"Visibility:  {r.visibility_m / 1000:.1f} km")
    lines += [
        f"Sunrise:     {_time_of_day(r.sunrise, tz)}",
        f"Sunset:      {_time_of_day(r.sunset, tz)}",
        RULE,
    ]
    return "\n".join(lines)


def format_forecast(
    buckets: list[DailyForecastBucket],
    units: UnitSystem = UnitSystem.METRIC,
    max_days: int = 5,
) -> str:
    """One block per day, low and high rounded to one decimal."""
    t, v = _TEMP_UNITS[units], _SPEED_UNITS[units]
    lines = ["", FORECAST_TITLE, RULE]
    for b in buckets[:max_days]:
        lines += [
            b.date_key,
            f"   Temperature: {b.min_temp:.1f}–{b.max_temp:.1f}{t}",
            f"   Conditions:  {b.description}",
            f"   Humidity:    {b.humidity}%",
            f"   Wind:        {b.wind_speed} {v}",
            "",
        ]
    lines.append(RULE)
    return "\n".join(lines)


def format_favorites(cities: list[str]) -> str:
    if not cities:
        return "No favorite cities yet."
    lines = ["", "Favorite cities:"]
    lines += [f"{i}. {city}" for i, city in enumerate(cities, start=1)]
    return "\n".join(lines)
