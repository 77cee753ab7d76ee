"""Group 3-hourly forecast samples into calendar-day buckets."""

from collections.abc import Iterable
from datetime import datetime, tzinfo

from weathercli.models.weather import DailyForecastBucket, ForecastEntry

MAX_FORECAST_DAYS = 5


def date_key(dt: int, tz: tzinfo | None = None) -> str:
    """Calendar date of an epoch timestamp as 'YYYY/M/D'.

    With tz=None the runtime's local zone is used.
    """
    d = datetime.fromtimestamp(dt, tz)
    return f"{d.year}/{d.month}/{d.day}"


def group_by_day(
    entries: Iterable[ForecastEntry],
    tz: tzinfo | None = None,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DailyForecastBucket]:
    """Bucket entries by date in first-seen order, keeping the first max_days.

    Truncation is by bucket order, not by calendar window: with
    out-of-order timestamps a later day can push out a fuller one.
    """
    buckets: dict[str, DailyForecastBucket] = {}
    for entry in entries:
        key = date_key(entry.dt, tz)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = DailyForecastBucket(
                date_key=key,
                description=entry.description,
                humidity=entry.humidity,
                wind_speed=entry.wind_speed,
            )
            buckets[key] = bucket
        bucket.temperatures.append(entry.temperature)
    return list(buckets.values())[:max_days]
