"""Current conditions from the OpenWeatherMap ``/weather`` endpoint."""

from __future__ import annotations

from weather_viewer.datasources.openweather.client import CURRENT_API
from weather_viewer.datasources.openweather.models import CurrentConditions
from weather_viewer.services.http import session


def fetch_current(city: str, api_key: str) -> CurrentConditions:
    """
    Fetch current weather for a city.

    Args:
        city: City name as typed by the user (e.g. "Moscow").
        api_key: OpenWeatherMap ``appid``.

    Raises:
        requests.HTTPError: If the city is unknown or the key is rejected.
    """
    resp = session.get(CURRENT_API, params={"q": city, "appid": api_key})
    resp.raise_for_status()
    return CurrentConditions.from_api(resp.json())
