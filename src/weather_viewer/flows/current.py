"""
Prefect flow for the "current weather" tab.

Fetches current conditions and the 9-point three-hourly forecast from
OpenWeatherMap and renders the card, the forecast bar chart and the four
24-hour charts.

Run locally:
    python -m weather_viewer.flows.current Moscow
"""

from __future__ import annotations

import sys
from typing import Any

import requests
from prefect import flow, task

from weather_viewer.analysis.schedule import WeatherSample
from weather_viewer.config import get_settings
from weather_viewer.datasources import openweather
from weather_viewer.renderers.bar_chart import build_temperature_bar_svg
from weather_viewer.renderers.current import build_current_html, current_summary
from weather_viewer.renderers.page import Chart, build_current_tab_html, build_metric_charts
from weather_viewer.renderers.weather_utils import HOURLY_TICK_FORMAT

# The 24 h charts only span a day, so the date line is dropped
FORECAST_TICK_FORMAT = HOURLY_TICK_FORMAT.split("\n")[0]
FORECAST_FREQUENCY = "3h"


@task(name="fetch-current")
def fetch_current(city: str) -> openweather.CurrentConditions:
    """Fetch current conditions from OpenWeatherMap."""
    return openweather.fetch_current(city, get_settings().openweather_api_key)


@task(name="fetch-forecast")
def fetch_forecast(city: str) -> list[WeatherSample]:
    """Fetch the 24-hour forecast from OpenWeatherMap."""
    return openweather.fetch_forecast(city, get_settings().openweather_api_key)


@task(name="render-current-tab")
def render_current_tab(
    city: str,
    conditions: openweather.CurrentConditions,
    forecast: list[WeatherSample],
) -> tuple[str, list[Chart]]:
    """Render tab 1 and return its HTML with the charts to save."""
    bar_chart = None
    charts: list[Chart] = []
    if forecast:
        bar_chart = Chart(
            slug="current_temperature_bars",
            title="Temperature",
            svg=build_temperature_bar_svg(forecast),
        )
        charts = build_metric_charts(
            forecast,
            prefix="current",
            show_deviation=False,
            frequency=FORECAST_FREQUENCY,
            tick_format=FORECAST_TICK_FORMAT,
        )

    html = build_current_tab_html(build_current_html(conditions, city), bar_chart, charts)
    return html, ([bar_chart] if bar_chart else []) + charts


@flow(name="current-weather", log_prints=True)
def build_current(city: str) -> dict[str, Any]:
    """
    Build the current weather tab for a city.

    A failed forecast request leaves the card in place without the
    forecast charts.

    Raises:
        requests.HTTPError: If OpenWeatherMap doesn't know the city.
    """
    print(f"Fetching current weather for {city}...")
    conditions = fetch_current(city)
    summary = current_summary(conditions)
    print(summary)

    print("Fetching 24-hour forecast...")
    try:
        forecast = fetch_forecast(city)
    except requests.RequestException as e:
        print(f"Warning: forecast request failed ({e}).")
        forecast = []
    if not forecast:
        print("Warning: forecast is empty. Building without forecast charts.")

    html, charts = render_current_tab(city, conditions, forecast)
    return {
        "summary": summary,
        "forecast_points": len(forecast),
        "html": html,
        "charts": charts,
    }


if __name__ == "__main__":
    result = build_current(sys.argv[1] if len(sys.argv) > 1 else "Moscow")
    print(f"Flow complete: {result['summary']} ({result['forecast_points']} forecast points)")
