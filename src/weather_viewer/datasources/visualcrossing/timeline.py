"""Day → hours weather timeline for a date range."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from weather_viewer.datasources.visualcrossing.client import TIMELINE_API, UNIT_GROUP
from weather_viewer.services.http import session

if TYPE_CHECKING:
    from datetime import date


def timeline_url(city: str, start: date, end: date) -> str:
    """URL for the timeline of ``city`` from ``start`` to ``end`` inclusive."""
    return f"{TIMELINE_API}/{quote(city)}/{start.isoformat()}/{end.isoformat()}"


def fetch_timeline(city: str, start: date, end: date, api_key: str) -> dict[str, Any]:
    """
    Fetch observed/forecast weather for a city over a date range.

    Args:
        city: City name.
        start: First day of the range.
        end: Last day of the range.
        api_key: Visual Crossing key.

    Returns:
        Raw API response dict with a ``days`` list, each day holding ``hours``.
    """
    params = {"unitGroup": UNIT_GROUP, "key": api_key}
    resp = session.get(timeline_url(city, start, end), params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
