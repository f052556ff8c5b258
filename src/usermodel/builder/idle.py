"""Idle synthesis: turn the uncovered residue of the timeline into Idle expectations."""

from __future__ import annotations

from collections.abc import Iterable

from usermodel.core.expectation import ExpectationKind, UserExpectation, expectations_to_ranges
from usermodel.core.ranges import Range, find_empty_ranges_between_ranges

INSIGNIFICANT_MS = 1.0
"""Gaps no longer than this are slivers between adjacent expectations, not idle time."""


def find_idle_expectations(
    expectations: Iterable[UserExpectation],
    bounds: Range | None,
    insignificant_ms: float = INSIGNIFICANT_MS,
) -> list[UserExpectation]:
    """Create an Idle expectation for every significant gap between expectations.

    Args:
        expectations: Already detected expectations; may overlap.
        bounds: Timeline bounds of the trace, None for an empty trace.
        insignificant_ms: Gaps with duration <= this are dropped.

    Returns:
        Idle expectations ascending by start, each spanning exactly one gap
        and carrying no source events.
    """
    if bounds is None:
        return []

    gaps = find_empty_ranges_between_ranges(expectations_to_ranges(expectations), bounds)
    return [
        UserExpectation(ExpectationKind.IDLE, gap.min, gap.max)
        for gap in gaps
        if gap.duration > insignificant_ms
    ]
