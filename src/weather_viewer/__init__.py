"""Weather Viewer - weather observations, forecasts and statistics charts.

Architecture::

    datasources/   External APIs (OpenWeatherMap current/forecast, Visual Crossing timeline)
    analysis/      Pure data shaping (schedule extraction, series statistics)
    renderers/     Pure data → HTML/SVG (current card, bar chart, line charts, tabs)
    flows/         Prefect orchestration (fetch, shape, render, write site)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: datasources → analysis → renderers → site/

Extension points (see each package's docstring):
  - New data source:   datasources/__init__.py
  - New chart:         renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_viewer.analysis.schedule import WeatherSample
from weather_viewer.config import Settings

__all__ = ["Settings", "WeatherSample", "__version__"]
