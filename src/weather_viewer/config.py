"""
Application settings.

Values come from ``WEATHER_VIEWER_*`` environment variables, e.g.::

    export WEATHER_VIEWER_OPENWEATHER_API_KEY=...
    export WEATHER_VIEWER_VISUALCROSSING_API_KEY=...
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "WEATHER_VIEWER_"


class Settings(BaseModel):
    """Runtime configuration for the CLI and flows."""

    model_config = {"str_strip_whitespace": True}

    app_name: str = "weather-viewer"
    app_env: str = "development"
    debug: bool = False
    openweather_api_key: str = Field(default="", description="OpenWeatherMap appid")
    visualcrossing_api_key: str = Field(default="", description="Visual Crossing key")
    site_dir: Path = Path("site")
    api_port: int = Field(default=8000, ge=1, le=65535)


def _from_environ(environ: Mapping[str, str]) -> dict[str, str]:
    """Collect prefixed environment variables as Settings field values."""
    values: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw
    return values


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment (cached after first call)."""
    return Settings.model_validate(_from_environ(os.environ))


def clear_settings_cache() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
