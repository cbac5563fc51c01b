"""Tabbed page assembly.

Three tabs: current weather (card, forecast bars, four 24 h charts),
statistics with ±σ band, and statistics with mean only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weather_viewer.analysis.schedule import series_points
from weather_viewer.renderers import NO_DATA_HTML, render_template
from weather_viewer.renderers.line_chart import build_line_chart_svg
from weather_viewer.renderers.weather_utils import METRICS

if TYPE_CHECKING:
    from datetime import date

    from weather_viewer.analysis.schedule import WeatherSample

TAB_CURRENT = "current"
TAB_DEVIATION = "deviation"
TAB_MEAN = "mean"


@dataclass
class Chart:
    """A rendered chart and the file name it is saved under."""

    slug: str
    title: str
    svg: str

    @property
    def filename(self) -> str:
        return f"{self.slug}.svg"

    @property
    def has_svg(self) -> bool:
        """False when the series was empty and ``svg`` is the no-data note."""
        return self.svg.lstrip().startswith("<svg")


def build_metric_charts(
    samples: list[WeatherSample],
    *,
    prefix: str,
    show_deviation: bool,
    frequency: str,
    tick_format: str | None = None,
) -> list[Chart]:
    """Build the temperature/pressure/humidity/wind line charts for samples."""
    charts = []
    for metric in METRICS:
        points = series_points(samples, metric.field)
        svg = build_line_chart_svg(
            points,
            metric.name,
            metric.color,
            show_deviation=show_deviation,
            frequency=frequency,
            tick_format=tick_format,
        )
        charts.append(Chart(slug=f"{prefix}_{metric.slug}", title=metric.name, svg=svg))
    return charts


def build_current_tab_html(
    current_html: str,
    bar_chart: Chart | None,
    forecast_charts: list[Chart],
) -> str:
    """Tab 1: current conditions, forecast bars and the four 24 h charts."""
    return render_template(
        "current_tab.html.j2",
        current_html=current_html,
        bar_chart=bar_chart,
        forecast_charts=forecast_charts,
        no_data=NO_DATA_HTML,
    )


def build_statistics_tab_html(
    charts: list[Chart],
    *,
    city: str,
    start: date,
    end: date,
    frequency: str,
    show_deviation: bool,
) -> str:
    """Tabs 2 and 3: the four charts for a date range, with or without ±σ."""
    return render_template(
        "statistics_tab.html.j2",
        charts=charts,
        city=city,
        start=start.isoformat(),
        end=end.isoformat(),
        frequency=frequency,
        show_deviation=show_deviation,
        no_data=NO_DATA_HTML,
    )


def build_page_html(
    *,
    city: str,
    updated: str,
    current_tab: str = "",
    deviation_tab: str = "",
    mean_tab: str = "",
) -> str:
    """Full page with the three tabs; an empty tab shows the no-data note."""
    tabs = [
        {"id": TAB_CURRENT, "label": "Current weather", "html": current_tab or NO_DATA_HTML},
        {"id": TAB_DEVIATION, "label": "Statistics (σ)", "html": deviation_tab or NO_DATA_HTML},
        {"id": TAB_MEAN, "label": "Statistics (mean)", "html": mean_tab or NO_DATA_HTML},
    ]
    return render_template("base.html.j2", city=city, updated=updated, tabs=tabs)
