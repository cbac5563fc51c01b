"""
Prefect flow for building the tabbed weather page.

Runs the current-weather and statistics flows, assembles the three tabs
into ``index.html`` and saves every chart as a standalone SVG file.

Run locally:
    python -m weather_viewer.flows.build Moscow
"""

from __future__ import annotations

import sys
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any

import requests
from prefect import flow, task

from weather_viewer.analysis.schedule import Frequency
from weather_viewer.config import get_settings
from weather_viewer.flows.current import build_current
from weather_viewer.flows.statistics import build_statistics
from weather_viewer.renderers.page import Chart, build_page_html

CHARTS_SUBDIR = "charts"


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write the page to ``site_dir/index.html``."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@task(name="save-charts")
def save_charts(charts: list[Chart], site_dir: Path) -> list[Path]:
    """Save each rendered chart as ``site_dir/charts/<slug>.svg``."""
    charts_dir = site_dir / CHARTS_SUBDIR
    charts_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for chart in charts:
        if not chart.has_svg:
            continue
        path = charts_dir / chart.filename
        path.write_text(chart.svg, encoding="utf-8")
        paths.append(path)
    return paths


@flow(name="build-site", log_prints=True)
def build_site(
    city: str,
    start: date,
    end: date,
    frequency: str = Frequency.HOURLY,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build the tabbed page for a city.

    The page is written even when the timeline has no data; the statistics
    tabs then show a no-data note and the result carries ``"error"``.
    Likewise a city OpenWeatherMap rejects leaves the current tab empty and
    sets ``"current_error"``.

    Raises:
        requests.HTTPError: If the timeline request fails.
    """
    site_dir = site_dir or get_settings().site_dir

    current_error = None
    try:
        current = build_current(city)
    except requests.RequestException as e:
        print(f"Warning: current weather unavailable ({e}).")
        current = {"html": "", "charts": []}
        current_error = "city not found"
    stats = build_statistics(city, start, end, frequency)

    charts: list[Chart] = list(current["charts"])
    deviation_html = ""
    mean_html = ""
    if "error" not in stats:
        deviation_html = stats["deviation"]["html"]
        mean_html = stats["mean"]["html"]
        charts += stats["deviation"]["charts"] + stats["mean"]["charts"]

    print("Building HTML...")
    html = build_page_html(
        city=city,
        updated=datetime.now().strftime("%Y-%m-%d %H:%M"),
        current_tab=current["html"],
        deviation_tab=deviation_html,
        mean_tab=mean_html,
    )

    print("Writing site...")
    output_path = write_site(html, site_dir)
    chart_paths = save_charts(charts, site_dir)
    print(f"Site built: {output_path} ({len(chart_paths)} charts)")

    result: dict[str, Any] = {
        "output": str(output_path),
        "charts": len(chart_paths),
        "samples": stats.get("samples", 0),
    }
    if current_error:
        result["current_error"] = current_error
    if "error" in stats:
        result["error"] = stats["error"]
    return result


if __name__ == "__main__":
    today = date.today()
    result = build_site(
        sys.argv[1] if len(sys.argv) > 1 else "Moscow",
        today - timedelta(days=7),
        today,
    )
    print(f"Flow complete: {result}")
