"""Decode a zutool weather-status document into a ForecastSet."""

import logging
from typing import Any

from headache.config.defaults import DAY_KEYS
from headache.ingest.errors import ForecastParseError
from headache.models.forecast import Day, DaySeries, ForecastSet, HourlyRecord

logger = logging.getLogger(__name__)


def parse_forecast(raw: dict) -> ForecastSet:
    """Build a ForecastSet from the decoded JSON object.

    Missing or malformed day arrays become empty series; every hourly
    field is coerced to text.
    """
    if not isinstance(raw, dict):
        raise ForecastParseError(
            f"expected a JSON object, got {type(raw).__name__}"
        )

    days = tuple(
        DaySeries(label=day.label, hours=_parse_hours(raw, day))
        for day in Day
    )
    return ForecastSet(
        place_name=_text(raw.get("place_name")),
        place_id=_text(raw.get("place_id")),
        prefectures_id=_text(raw.get("prefectures_id")),
        date_time=_text(raw.get("dateTime")),
        days=days,
    )


def _parse_hours(raw: dict, day: Day) -> tuple[HourlyRecord, ...]:
    entries = None
    for key in DAY_KEYS[day]:
        if raw.get(key) is not None:
            entries = raw[key]
            break
    if entries is None:
        return ()
    if not isinstance(entries, list):
        logger.warning(
            "Ignoring %s: expected a list, got %s", day.label, type(entries).__name__
        )
        return ()

    hours: list[HourlyRecord] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping %s entry %d: not an object", day.label, i)
            continue
        hours.append(
            HourlyRecord(
                hour=_text(entry.get("time")),
                weather_code=_text(entry.get("weather")),
                temperature=_text(entry.get("temp")),
                pressure=_text(entry.get("pressure")),
                pressure_level=_text(entry.get("pressure_level")),
            )
        )
    return tuple(hours)


def _text(value: Any) -> str:
    """Loosely-typed JSON scalar to display text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
