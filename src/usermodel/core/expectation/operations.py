"""Event bookkeeping across sets of expectations."""

from __future__ import annotations

from collections.abc import Iterable

from usermodel.core.event import EventSet, TraceEvent
from usermodel.core.expectation.models import UserExpectation
from usermodel.core.ranges import Range


def expectations_to_ranges(expectations: Iterable[UserExpectation]) -> list[Range]:
    """Timeline range of each expectation, in the same order."""
    return [expectation.range for expectation in expectations]


def get_covered_events(expectations: Iterable[UserExpectation]) -> EventSet:
    """Events a detector already claimed, expanded to their descendants.

    Args:
        expectations: Expectations of any kind.

    Returns:
        Union of every expectation's source events and their entire hierarchy.
    """
    covered = EventSet()
    for expectation in expectations:
        for event in expectation.source_events:
            covered.add_hierarchy(event)
    return covered


def get_associated_events(expectations: Iterable[UserExpectation]) -> EventSet:
    """Union of associated events over all expectations.

    Thread slices are expanded to their entire hierarchy; other events are
    added as-is.
    """
    associated = EventSet()
    for expectation in expectations:
        for event in expectation.associated_events:
            if event.is_thread_slice:
                associated.add_hierarchy(event)
            else:
                associated.add(event)
    return associated


def get_unassociated_events(events: Iterable[TraceEvent], associated: EventSet) -> list[TraceEvent]:
    """Events not in associated, in the order given."""
    return [event for event in events if event not in associated]
