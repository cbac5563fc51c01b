"""OpenWeatherMap API client constants.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

CURRENT_API = "https://api.openweathermap.org/data/2.5/weather"
FORECAST_API = "https://api.openweathermap.org/data/2.5/forecast"

# Without a ``units`` parameter the API reports temperatures in Kelvin
KELVIN_OFFSET = 273.15

# 9 three-hour steps covers the next 24 hours, both ends included
FORECAST_POINTS = 9

FORECAST_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
