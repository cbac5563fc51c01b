"""
Prefect flow for the statistics tabs.

Fetches a Visual Crossing timeline for a date range, samples it at the
requested frequency and renders the four charts twice: once with the ±σ
band (tab 2) and once with the mean only (tab 3).

Run locally:
    python -m weather_viewer.flows.statistics Moscow 2024-06-01 2024-06-07 3h
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from typing import Any

from prefect import flow, task

from weather_viewer.analysis.schedule import (
    Frequency,
    WeatherSample,
    extract_schedule,
    series_points,
)
from weather_viewer.config import get_settings
from weather_viewer.datasources import visualcrossing
from weather_viewer.renderers.page import build_metric_charts, build_statistics_tab_html


@task(name="fetch-timeline")
def fetch_timeline(city: str, start: date, end: date) -> dict[str, Any]:
    """Fetch the day → hours timeline from Visual Crossing."""
    return visualcrossing.fetch_timeline(city, start, end, get_settings().visualcrossing_api_key)


@task(name="extract-samples")
def extract_samples(document: dict[str, Any], frequency: str) -> list[WeatherSample]:
    """Flatten the timeline into samples every ``frequency``."""
    return extract_schedule(document, frequency)


@task(name="render-statistics-tab")
def render_statistics_tab(
    samples: list[WeatherSample],
    *,
    city: str,
    start: date,
    end: date,
    frequency: str,
    show_deviation: bool,
) -> dict[str, Any]:
    """Render one statistics tab (with or without band) and its charts."""
    prefix = "deviation" if show_deviation else "mean"
    charts = build_metric_charts(
        samples, prefix=prefix, show_deviation=show_deviation, frequency=frequency
    )
    html = build_statistics_tab_html(
        charts,
        city=city,
        start=start,
        end=end,
        frequency=frequency,
        show_deviation=show_deviation,
    )
    return {"html": html, "charts": charts}


@flow(name="weather-statistics", log_prints=True)
def build_statistics(
    city: str,
    start: date,
    end: date,
    frequency: str = Frequency.HOURLY,
) -> dict[str, Any]:
    """
    Build both statistics tabs for a city and date range.

    Returns ``{"error": "no data"}`` when the timeline has no hourly data
    with a usable timestamp.

    Raises:
        requests.HTTPError: If the timeline request fails.
    """
    print(f"Fetching {city} timeline {start} to {end}...")
    document = fetch_timeline(city, start, end)

    samples = extract_samples(document, frequency)
    # Samples without a timestamp can't be plotted
    if not series_points(samples, "temperature"):
        print("No data to display.")
        return {"error": "no data", "samples": 0}
    print(f"Extracted {len(samples)} samples every {frequency}")

    tabs = {
        name: render_statistics_tab(
            samples,
            city=city,
            start=start,
            end=end,
            frequency=frequency,
            show_deviation=show_deviation,
        )
        for name, show_deviation in (("deviation", True), ("mean", False))
    }
    return {"samples": len(samples), **tabs}


if __name__ == "__main__":
    args = sys.argv[1:]
    today = date.today()
    result = build_statistics(
        args[0] if args else "Moscow",
        date.fromisoformat(args[1]) if len(args) > 1 else today - timedelta(days=7),
        date.fromisoformat(args[2]) if len(args) > 2 else today,
        args[3] if len(args) > 3 else Frequency.HOURLY,
    )
    print(f"Flow complete: {result.get('samples', 0)} samples")
