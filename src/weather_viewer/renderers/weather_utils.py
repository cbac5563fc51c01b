"""Shared chart constants and formatting helpers for renderers.

Pure functions with no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from weather_viewer.analysis.schedule import Frequency


@dataclass(frozen=True)
class Metric:
    """One plotted weather quantity."""

    field: str  # WeatherSample attribute
    name: str
    unit: str
    color: str
    slug: str


#: The four charts shown side by side, in grid order.
METRICS: list[Metric] = [
    Metric("temperature", "Temperature", "°C", "#0000ff", "temperature"),
    Metric("pressure", "Pressure", "hPa", "#008000", "pressure"),
    Metric("humidity", "Humidity", "%", "#808000", "humidity"),
    Metric("wind_speed", "Wind speed", "m/s", "#ff00ff", "wind"),
]

MEAN_COLOR = "#ff0000"
BAND_COLOR = "#a0a0a4"

HOURLY_TICK_FORMAT = "%H:%M\n%d.%m"
DAILY_TICK_FORMAT = "%d.%m.%Y"


def tick_format_for(frequency: str) -> str:
    """strftime layout for time-axis labels at a given frequency.

    Sub-daily frequencies show time over date; anything else shows the date.
    """
    if frequency in (Frequency.HOURLY, Frequency.EVERY_3H, Frequency.EVERY_6H, Frequency.EVERY_12H):
        return HOURLY_TICK_FORMAT
    return DAILY_TICK_FORMAT


def format_value(value: float) -> str:
    """Axis label for a value: integers stay bare, others get one decimal."""
    if float(value).is_integer():
        return f"{value:.0f}"
    return f"{value:.1f}"
