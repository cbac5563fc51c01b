"""Schedule extraction: nested day/hour documents -> flat weather samples.

The Visual Crossing timeline endpoint returns one object per calendar day,
each carrying an ``hours`` list. ``extract_schedule`` flattens that into an
ordered list of ``WeatherSample`` taken every N hours, where the stride
restarts at the first hour of each day.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

#: Numeric fields of an hourly record, keyed by WeatherSample attribute.
HOUR_FIELDS = {
    "temperature": "temp",
    "pressure": "pressure",
    "humidity": "humidity",
    "wind_speed": "windspeed",
}


class Frequency(StrEnum):
    """Reporting interval for a sampled schedule."""

    HOURLY = "1h"
    EVERY_3H = "3h"
    EVERY_6H = "6h"
    EVERY_12H = "12h"
    DAILY = "1d"


_STRIDES: dict[str, int] = {
    Frequency.HOURLY: 1,
    Frequency.EVERY_3H: 3,
    Frequency.EVERY_6H: 6,
    Frequency.EVERY_12H: 12,
    Frequency.DAILY: 24,
}


@dataclass(frozen=True)
class WeatherSample:
    """One weather reading at a point in time."""

    timestamp: datetime | None  # None when the source timestamp was malformed
    temperature: float  # °C
    pressure: float  # hPa
    humidity: float  # %
    wind_speed: float  # m/s


def stride_for(frequency: str) -> int:
    """Hourly stride for a frequency string; unknown values mean every hour."""
    return _STRIDES.get(frequency, 1)


def parse_timestamp(text: str, fmt: str = TIMESTAMP_FORMAT) -> datetime | None:
    """Parse ``text`` with a fixed layout, returning None if it doesn't fit."""
    try:
        return datetime.strptime(text, fmt)
    except (TypeError, ValueError):
        return None


def as_float(value: Any) -> float:
    """Numeric JSON value as float; anything else (missing, text, bool) is 0.0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


def as_mapping(value: Any) -> Mapping[str, Any]:
    """JSON object or an empty mapping."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """JSON array or an empty list."""
    return value if isinstance(value, list) else []


def sample_from_hour(date_str: str, hour: Mapping[str, Any]) -> WeatherSample:
    """Build a sample from one hourly record of the day ``date_str``."""
    time_str = hour.get("datetime")
    time_str = time_str if isinstance(time_str, str) else ""
    values = {attr: as_float(hour.get(key)) for attr, key in HOUR_FIELDS.items()}
    return WeatherSample(timestamp=parse_timestamp(f"{date_str} {time_str}"), **values)


def extract_schedule(document: Any, frequency: str = Frequency.HOURLY) -> list[WeatherSample]:
    """
    Flatten a day → hours schedule into samples taken every ``frequency``.

    Args:
        document: Decoded JSON with a ``days`` list, each day holding
            ``datetime`` (YYYY-MM-DD) and optionally ``hours``.
        frequency: One of ``Frequency``; unrecognized values sample every hour.

    Returns:
        Samples in document order. Days without ``hours`` are skipped; a
        malformed document gives an empty list.
    """
    stride = stride_for(frequency)
    samples: list[WeatherSample] = []

    for raw_day in as_list(as_mapping(document).get("days")):
        day = as_mapping(raw_day)
        if "hours" not in day:
            logger.debug("Skipping day without hourly data: %s", day.get("datetime"))
            continue
        date_str = day.get("datetime")
        date_str = date_str if isinstance(date_str, str) else ""
        hours = as_list(day["hours"])
        for hour in hours[::stride]:
            samples.append(sample_from_hour(date_str, as_mapping(hour)))

    logger.debug("Extracted %d samples at stride %d", len(samples), stride)
    return samples


def series_points(
    samples: Iterable[WeatherSample], field: str
) -> list[tuple[datetime, float]]:
    """Project samples onto ``(timestamp, value)`` pairs for one field.

    Samples whose timestamp could not be parsed are left out.
    """
    return [(s.timestamp, getattr(s, field)) for s in samples if s.timestamp is not None]
