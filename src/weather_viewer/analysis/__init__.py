"""Pure data shaping between datasources and renderers.

No I/O, no Prefect decorators: every function takes decoded JSON or samples
and returns new values.

Public API:
  - schedule: WeatherSample, Frequency, extract_schedule, series_points
  - statistics: SeriesSummary, summarize
"""

from weather_viewer.analysis.schedule import (
    Frequency,
    WeatherSample,
    extract_schedule,
    series_points,
    stride_for,
)
from weather_viewer.analysis.statistics import SeriesSummary, summarize

__all__ = [
    "Frequency",
    "SeriesSummary",
    "WeatherSample",
    "extract_schedule",
    "series_points",
    "stride_for",
    "summarize",
]
