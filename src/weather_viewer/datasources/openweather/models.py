"""OpenWeatherMap response models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from weather_viewer.analysis.schedule import WeatherSample, as_float, as_mapping, parse_timestamp
from weather_viewer.datasources.openweather.client import FORECAST_TIME_FORMAT, KELVIN_OFFSET

if TYPE_CHECKING:
    from collections.abc import Mapping


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""
    return kelvin - KELVIN_OFFSET


@dataclass(frozen=True)
class CurrentConditions:
    """Current weather at a city."""

    temperature: float  # °C
    feels_like: float  # °C
    humidity: int  # %
    pressure: int  # hPa
    wind_speed: float  # m/s

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> CurrentConditions:
        """Build from a ``/weather`` response body."""
        data = as_mapping(data)
        main = as_mapping(data.get("main"))
        wind = as_mapping(data.get("wind"))
        return cls(
            temperature=kelvin_to_celsius(as_float(main.get("temp"))),
            feels_like=kelvin_to_celsius(as_float(main.get("feels_like"))),
            humidity=int(as_float(main.get("humidity"))),
            pressure=int(as_float(main.get("pressure"))),
            wind_speed=as_float(wind.get("speed")),
        )


def sample_from_forecast_item(item: Mapping[str, Any]) -> WeatherSample:
    """Build a sample from one entry of the ``/forecast`` ``list`` array."""
    main = as_mapping(item.get("main"))
    wind = as_mapping(item.get("wind"))
    dt_txt = item.get("dt_txt")
    return WeatherSample(
        timestamp=parse_timestamp(dt_txt, FORECAST_TIME_FORMAT) if isinstance(dt_txt, str) else None,
        temperature=kelvin_to_celsius(as_float(main.get("temp"))),
        pressure=as_float(main.get("pressure")),
        humidity=as_float(main.get("humidity")),
        wind_speed=as_float(wind.get("speed")),
    )
