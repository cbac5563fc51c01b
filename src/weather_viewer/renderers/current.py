"""Current conditions card."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_viewer.renderers import render_template
from weather_viewer.renderers.palette import color_for_temperature

if TYPE_CHECKING:
    from weather_viewer.datasources.openweather import CurrentConditions


def current_summary(conditions: CurrentConditions) -> str:
    """One-line summary, temperatures truncated to whole degrees."""
    return (
        f"{int(conditions.temperature)}°C, feels like {int(conditions.feels_like)}°C  |  "
        f"Humidity: {conditions.humidity}%  |  "
        f"Pressure: {conditions.pressure} hPa  |  "
        f"Wind: {conditions.wind_speed:g} m/s"
    )


def build_current_html(conditions: CurrentConditions, city: str) -> str:
    """Build the current conditions card, tinted by temperature."""
    return render_template(
        "current.html.j2",
        city=city,
        summary=current_summary(conditions),
        background=color_for_temperature(conditions.temperature),
    )
