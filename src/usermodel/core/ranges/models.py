"""Numeric range model.

Usage:
    bounds = Range(0.0, 100.0)
    bounds.duration  # 100.0
    bounds.contains(100.0)  # False: max is exclusive
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Range:
    """Closed-open span [min, max) on the trace timeline, in milliseconds."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise ValueError(f"Range max {self.max} is below min {self.min}")

    @property
    def duration(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        """Half-open containment: min <= value < max."""
        return self.min <= value < self.max

    def intersects(self, other: Range) -> bool:
        """True if the two spans share a non-empty stretch of time."""
        return max(self.min, other.min) < min(self.max, other.max)
