"""OpenWeatherMap data source.

Current conditions and the 24-hour (9 × 3 h) forecast for a city.

Public API:
  - current: fetch_current
  - forecast: fetch_forecast, parse_forecast
  - models: CurrentConditions, kelvin_to_celsius
"""

from weather_viewer.datasources.openweather.client import CURRENT_API, FORECAST_API
from weather_viewer.datasources.openweather.current import fetch_current
from weather_viewer.datasources.openweather.forecast import fetch_forecast, parse_forecast
from weather_viewer.datasources.openweather.models import CurrentConditions, kelvin_to_celsius

__all__ = [
    "CURRENT_API",
    "FORECAST_API",
    "CurrentConditions",
    "fetch_current",
    "fetch_forecast",
    "kelvin_to_celsius",
    "parse_forecast",
]
