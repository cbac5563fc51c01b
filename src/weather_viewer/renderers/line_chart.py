"""Line chart with mean line and optional ±σ band.

Geometry (scales, ticks, polyline points) is computed here; the template
only places the pieces.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from weather_viewer.analysis.statistics import summarize
from weather_viewer.renderers import NO_DATA_HTML, render_template
from weather_viewer.renderers.weather_utils import (
    BAND_COLOR,
    MEAN_COLOR,
    format_value,
    tick_format_for,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from weather_viewer.analysis.statistics import Point

# SVG dimensions
SVG_WIDTH = 560
SVG_HEIGHT = 320
MARGIN_LEFT = 60
MARGIN_TOP = 34
MARGIN_RIGHT = 20
MARGIN_BOTTOM = 70  # two-line tick labels + legend

MAX_X_TICKS = 10
Y_TICKS = 5


def build_line_chart_svg(
    points: Sequence[Point],
    name: str,
    color: str,
    *,
    show_deviation: bool,
    frequency: str,
    tick_format: str | None = None,
) -> str:
    """Build a line chart SVG for one series.

    Args:
        points: Ordered ``(timestamp, value)`` pairs.
        name: Series name, also the chart title.
        color: Line color for the series.
        show_deviation: Draw ``+σ``/``-σ`` lines (skipped for a flat series).
        frequency: Sampling frequency, picks the time-axis label layout.
        tick_format: strftime layout overriding the frequency default.

    Returns:
        Standalone SVG document, or a "no data" paragraph for an empty series.
    """
    if not points:
        return NO_DATA_HTML

    summary = summarize(points)
    series: list[tuple[str, str, Sequence[Point]]] = [
        (name, color, points),
        ("Mean", MEAN_COLOR, [(t, summary.mean) for t, _ in points]),
    ]
    if show_deviation and summary.has_band:
        series.append(("+σ", BAND_COLOR, summary.upper))
        series.append(("-σ", BAND_COLOR, summary.lower))

    plot_right = SVG_WIDTH - MARGIN_RIGHT
    plot_bottom = SVG_HEIGHT - MARGIN_BOTTOM
    plot_width = plot_right - MARGIN_LEFT
    plot_height = plot_bottom - MARGIN_TOP

    start, end = points[0][0], points[-1][0]
    span = (end - start).total_seconds()

    def x_for_time(t: datetime) -> float:
        """Convert a timestamp to SVG x coordinate."""
        if span <= 0:
            return MARGIN_LEFT + plot_width / 2
        return MARGIN_LEFT + (t - start).total_seconds() / span * plot_width

    all_values = [v for _, _, pts in series for _, v in pts]
    y_min, y_max = _value_range(all_values)

    def y_for_value(v: float) -> float:
        """Convert a value to SVG y coordinate (inverted)."""
        return plot_bottom - (v - y_min) / (y_max - y_min) * plot_height

    fmt = tick_format or tick_format_for(frequency)
    x_ticks = [
        {"x": round(x_for_time(t), 1), "lines": t.strftime(fmt).split("\n")}
        for t in _time_ticks(start, end, min(MAX_X_TICKS, len(points)))
    ]
    y_ticks = []
    for i in range(Y_TICKS + 1):
        val = y_min + (y_max - y_min) * i / Y_TICKS
        y_ticks.append({"y": round(y_for_value(val), 1), "label": format_value(round(val, 1))})

    lines = [
        {
            "name": label,
            "color": line_color,
            "points": _polyline(pts, x_for_time, y_for_value),
            "dashed": label != name,
        }
        for label, line_color, pts in series
    ]

    return render_template(
        "line_chart.svg.j2",
        title=name,
        svg_width=SVG_WIDTH,
        svg_height=SVG_HEIGHT,
        margin_left=MARGIN_LEFT,
        margin_top=MARGIN_TOP,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        lines=lines,
        legend_y=SVG_HEIGHT - 12,
        mean=f"{summary.mean:.2f}",
        stddev=f"{summary.stddev:.2f}",
    )


def _value_range(values: list[float]) -> tuple[float, float]:
    """Y-axis bounds with a little headroom; never a zero-height range."""
    lo, hi = min(values), max(values)
    if lo == hi:
        return lo - 1, hi + 1
    pad = (hi - lo) * 0.05
    return lo - pad, hi + pad


def _time_ticks(start: datetime, end: datetime, count: int) -> list[datetime]:
    """``count`` evenly spaced instants from ``start`` to ``end`` inclusive."""
    if count <= 1 or end <= start:
        return [start]
    step = (end - start) / (count - 1)
    return [start + step * i for i in range(count - 1)] + [end]


def _polyline(
    points: Sequence[Point],
    x_fn: Callable[[datetime], float],
    y_fn: Callable[[float], float],
) -> str:
    """Build SVG polyline points string."""
    return " ".join(f"{x_fn(t):.1f},{y_fn(v):.1f}" for t, v in points)
