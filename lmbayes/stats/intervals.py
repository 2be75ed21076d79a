"""Interval container and overlap measure shared by both fits."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[lower, upper]`` at a nominal probability level."""

    lower: float
    upper: float
    level: float = 0.95

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise ValueError(
                f"Interval bounds must be finite, got ({self.lower!r}, {self.upper!r})"
            )
        if self.lower > self.upper:
            raise ValueError(
                f"Interval lower bound {self.lower} exceeds upper bound {self.upper}"
            )

    @property
    def width(self) -> float:
        return float(self.upper - self.lower)

    @property
    def midpoint(self) -> float:
        return 0.5 * float(self.lower + self.upper)

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper

    def as_tuple(self) -> tuple[float, float]:
        return (float(self.lower), float(self.upper))


def interval_overlap(a: Interval, b: Interval) -> float:
    """Return the shared length of two intervals over the shorter width.

    The result lies in ``[0, 1]``: ``1`` when the shorter interval is nested in
    the longer one, ``0`` when they are disjoint. Two identical degenerate
    intervals count as full overlap.
    """
    shared = min(a.upper, b.upper) - max(a.lower, b.lower)
    if shared < 0:
        return 0.0
    shorter = min(a.width, b.width)
    if shorter == 0:
        return 1.0
    return float(min(1.0, shared / shorter))
