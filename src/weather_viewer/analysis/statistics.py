"""Mean and deviation band for a time series."""

from __future__ import annotations

import statistics
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

Point = tuple[datetime, float]


@dataclass(frozen=True)
class SeriesSummary:
    """Mean, population standard deviation and per-sample ±σ band."""

    mean: float
    stddev: float
    upper: list[Point] = field(default_factory=list)
    lower: list[Point] = field(default_factory=list)

    @property
    def has_band(self) -> bool:
        """Whether the band is worth drawing (a flat series has none)."""
        return self.stddev > 0


def summarize(points: Sequence[Point]) -> SeriesSummary:
    """
    Summarize an ordered series of ``(timestamp, value)`` points.

    The band follows each sample: ``value + stddev`` and ``value - stddev``
    at every timestamp, not ``mean ± stddev``.

    Raises:
        ValueError: If ``points`` is empty.
    """
    if not points:
        raise ValueError("Empty series")

    values = [v for _, v in points]
    mean = statistics.fmean(values)
    stddev = statistics.pstdev(values, mu=mean)

    return SeriesSummary(
        mean=mean,
        stddev=stddev,
        upper=[(t, v + stddev) for t, v in points],
        lower=[(t, v - stddev) for t, v in points],
    )
