"""Timeline ranges and gap finding."""

from usermodel.core.ranges.models import Range
from usermodel.core.ranges.operations import find_empty_ranges_between_ranges, find_overlapping_pairs

__all__ = [
    "Range",
    "find_empty_ranges_between_ranges",
    "find_overlapping_pairs",
]
