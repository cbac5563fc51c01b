"""24-hour forecast from the OpenWeatherMap ``/forecast`` endpoint."""

from __future__ import annotations

import logging
from typing import Any

from weather_viewer.analysis.schedule import WeatherSample, as_list, as_mapping
from weather_viewer.datasources.openweather.client import FORECAST_API, FORECAST_POINTS
from weather_viewer.datasources.openweather.models import sample_from_forecast_item
from weather_viewer.services.http import session

logger = logging.getLogger(__name__)


def parse_forecast(data: Any) -> list[WeatherSample]:
    """Turn a ``/forecast`` response body into samples, in response order."""
    items = as_list(as_mapping(data).get("list"))
    return [sample_from_forecast_item(as_mapping(item)) for item in items]


def fetch_forecast(city: str, api_key: str, *, points: int = FORECAST_POINTS) -> list[WeatherSample]:
    """
    Fetch the three-hourly forecast for a city.

    Args:
        city: City name.
        api_key: OpenWeatherMap ``appid``.
        points: Number of three-hour steps to request (``cnt``).

    Returns:
        Up to ``points`` samples, temperatures in °C.
    """
    params: dict[str, str | int] = {"q": city, "appid": api_key, "cnt": points}
    resp = session.get(FORECAST_API, params=params)
    resp.raise_for_status()
    samples = parse_forecast(resp.json())
    logger.debug("Forecast for %s: %d points", city, len(samples))
    return samples
