"""Visual Crossing Timeline API constants.

API docs: https://www.visualcrossing.com/resources/documentation/weather-api/timeline-weather-api/
"""

TIMELINE_API = "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"

UNIT_GROUP = "metric"
