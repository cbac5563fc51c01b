"""Visual Crossing weather data source.

Public API:
  - timeline: fetch_timeline (day → hours schedule for a date range)
"""

from weather_viewer.datasources.visualcrossing.client import TIMELINE_API
from weather_viewer.datasources.visualcrossing.timeline import fetch_timeline, timeline_url

__all__ = ["TIMELINE_API", "fetch_timeline", "timeline_url"]
