"""Temperature bar chart for the 24-hour forecast.

One bar per forecast point, labelled with its time of day and filled with
the temperature band color.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_viewer.renderers import NO_DATA_HTML, render_template
from weather_viewer.renderers.palette import color_for_temperature
from weather_viewer.renderers.weather_utils import format_value

if TYPE_CHECKING:
    from weather_viewer.analysis.schedule import WeatherSample

BAR_CHART_TITLE = "Temperature over the next 24 hours"

SVG_WIDTH = 760
SVG_HEIGHT = 300
MARGIN_LEFT = 55
MARGIN_TOP = 34
MARGIN_RIGHT = 20
MARGIN_BOTTOM = 40

# Headroom above and below the data, °C
Y_PADDING = 5
Y_TICKS = 5
BAR_FILL = 0.7  # fraction of each category slot covered by its bar


def build_temperature_bar_svg(samples: list[WeatherSample]) -> str:
    """Build the forecast bar chart SVG.

    Args:
        samples: Forecast samples in time order (temperatures in °C).

    Returns:
        Standalone SVG document, or a "no data" paragraph when empty.
    """
    if not samples:
        return NO_DATA_HTML

    temps = [s.temperature for s in samples]
    y_min = min(temps) - Y_PADDING
    y_max = max(temps) + Y_PADDING

    plot_right = SVG_WIDTH - MARGIN_RIGHT
    plot_bottom = SVG_HEIGHT - MARGIN_BOTTOM
    plot_width = plot_right - MARGIN_LEFT
    plot_height = plot_bottom - MARGIN_TOP

    def y_for_temp(t: float) -> float:
        """Convert a temperature to SVG y coordinate (inverted)."""
        return plot_bottom - (t - y_min) / (y_max - y_min) * plot_height

    # Bars grow from 0 °C, or from the nearest axis edge when 0 is off-scale
    baseline = y_for_temp(min(max(0.0, y_min), y_max))
    slot = plot_width / len(samples)
    bar_width = slot * BAR_FILL

    bars = []
    for i, sample in enumerate(samples):
        top = y_for_temp(sample.temperature)
        label = sample.timestamp.strftime("%H:%M") if sample.timestamp else "--:--"
        bars.append(
            {
                "x": round(MARGIN_LEFT + i * slot + (slot - bar_width) / 2, 1),
                "y": round(min(top, baseline), 1),
                "width": round(bar_width, 1),
                "height": round(abs(baseline - top), 1),
                "color": color_for_temperature(sample.temperature),
                "label": label,
                "label_x": round(MARGIN_LEFT + i * slot + slot / 2, 1),
                "title": f"{label}: {sample.temperature:.1f}°C",
            }
        )

    y_ticks = []
    for i in range(Y_TICKS + 1):
        val = y_min + (y_max - y_min) * i / Y_TICKS
        y_ticks.append({"y": round(y_for_temp(val), 1), "label": format_value(round(val, 1))})

    return render_template(
        "bar_chart.svg.j2",
        title=BAR_CHART_TITLE,
        svg_width=SVG_WIDTH,
        svg_height=SVG_HEIGHT,
        margin_left=MARGIN_LEFT,
        margin_top=MARGIN_TOP,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        bars=bars,
        y_ticks=y_ticks,
    )
