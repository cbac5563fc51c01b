"""Temperature → background/bar color.

Bands are checked top to bottom; the first match wins. Most bands include
their upper bound (``<=``), but -20 °C, 21 °C and 26 °C already belong to
the next band up (``<``).
"""

from __future__ import annotations

import operator
from collections.abc import Callable

# (threshold °C, comparator, color), evaluated in order
TEMPERATURE_BANDS: list[tuple[float, Callable[[float, float], bool], str]] = [
    (-20, operator.lt, "#191970"),  # midnight blue
    (-10, operator.le, "#4682B4"),  # steel blue
    (-5, operator.le, "#B0E0E6"),  # powder blue
    (0, operator.le, "#E0FFFF"),  # light cyan
    (10, operator.le, "#FFE4B5"),  # moccasin
    (15, operator.le, "#DEB887"),  # burlywood
    (21, operator.lt, "#DAA520"),  # goldenrod
    (26, operator.lt, "#FF8C00"),  # dark orange
]

HOTTEST_COLOR = "#B22222"  # firebrick


def color_for_temperature(temp_c: float) -> str:
    """Hex color for a temperature in °C."""
    for threshold, compare, color in TEMPERATURE_BANDS:
        if compare(temp_c, threshold):
            return color
    return HOTTEST_COLOR
