"""Range operations used for idle synthesis and overlap checks."""

from __future__ import annotations

from collections.abc import Iterable

from usermodel.core.ranges.models import Range


def find_empty_ranges_between_ranges(ranges: Iterable[Range], bounds: Range) -> list[Range]:
    """Find the parts of bounds not covered by any of the given ranges.

    Input ranges may overlap each other and may extend past the bounds; they
    are clipped to the bounds before the sweep. Zero-length ranges cover
    nothing, and zero-length gaps are never reported.

    Args:
        ranges: Covered ranges, in any order.
        bounds: Overall span to search.

    Returns:
        Maximal disjoint uncovered ranges, ascending by min. The whole bounds
        if nothing is covered.
    """
    covered_until = bounds.min
    gaps: list[Range] = []

    for r in sorted(ranges, key=lambda r: (r.min, r.max)):
        if r.duration == 0 or r.max <= bounds.min or r.min >= bounds.max:
            continue
        if r.min > covered_until:
            gaps.append(Range(covered_until, r.min))
        covered_until = max(covered_until, r.max)

    if covered_until < bounds.max:
        gaps.append(Range(covered_until, bounds.max))
    return gaps


def find_overlapping_pairs(ranges: list[Range]) -> list[tuple[int, int]]:
    """Find every pair of ranges that share time.

    Args:
        ranges: Ranges to compare, in caller order.

    Returns:
        Index pairs (i, j) with i < j for each intersecting pair.
    """
    return [
        (i, j)
        for i in range(len(ranges))
        for j in range(i + 1, len(ranges))
        if ranges[i].intersects(ranges[j])
    ]
