"""Core primitives: events, ranges and user expectations.

Architecture Note:
    core/ holds the data model and pure operations over it. Nothing here
    touches a host trace model. For the build pipeline see builder/; for the
    host model see trace/.
"""

from usermodel.core.event import EventKind, EventSet, TraceEvent
from usermodel.core.expectation import (
    CATCH_ALL_KINDS,
    ExpectationKind,
    UserExpectation,
    expectations_to_ranges,
    get_associated_events,
    get_covered_events,
    get_unassociated_events,
)
from usermodel.core.ranges import Range, find_empty_ranges_between_ranges, find_overlapping_pairs

__all__ = [
    # Events
    "EventKind",
    "EventSet",
    "TraceEvent",
    # Ranges
    "Range",
    "find_empty_ranges_between_ranges",
    "find_overlapping_pairs",
    # Expectations
    "CATCH_ALL_KINDS",
    "ExpectationKind",
    "UserExpectation",
    "expectations_to_ranges",
    "get_associated_events",
    "get_covered_events",
    "get_unassociated_events",
]
