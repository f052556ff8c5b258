"""User expectation models.

A user expectation is a labeled span of the trace timeline describing what the
user was waiting for at that point: the browser starting, a page loading, a
response to input, or nothing at all (idle).

Usage:
    load = UserExpectation(ExpectationKind.LOAD, start=10.0, end=250.0, source_events=[commit])
    load.kind in CATCH_ALL_KINDS  # True
    load.associated_events  # seeded with commit's entire hierarchy
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from usermodel.core.event import EventSet, TraceEvent
from usermodel.core.ranges import Range


class ExpectationKind(Enum):
    """Closed set of expectation kinds."""

    STARTUP = "Startup"
    LOAD = "Load"
    INPUT = "Response"
    IDLE = "Idle"

    @property
    def is_catch_all(self) -> bool:
        """Whether expectations of this kind absorb events no detector claimed.

        Input expectations are precise spans around a specific input event, so
        they never absorb leftovers.
        """
        match self:
            case ExpectationKind.STARTUP | ExpectationKind.LOAD | ExpectationKind.IDLE:
                return True
            case ExpectationKind.INPUT:
                return False
        raise AssertionError(f"Unhandled expectation kind: {self}")


CATCH_ALL_KINDS = frozenset(kind for kind in ExpectationKind if kind.is_catch_all)


class UserExpectation:
    """Labeled span of the timeline with the events that belong to it.

    Args:
        kind: Expectation kind.
        start: Start timestamp in milliseconds.
        end: End timestamp in milliseconds (must be > start).
        source_events: Events that made a detector emit this expectation.

    Raises:
        ValueError: If the span is empty or inverted.
    """

    __slots__ = ("kind", "start", "end", "source_events", "associated_events")

    def __init__(
        self,
        kind: ExpectationKind,
        start: float,
        end: float,
        source_events: Iterable[TraceEvent] = (),
    ) -> None:
        if end <= start:
            raise ValueError(f"{kind.value} expectation must have end > start, got [{start}, {end}]")
        self.kind = kind
        self.start = start
        self.end = end
        self.source_events = EventSet(source_events)
        self.associated_events = EventSet()
        for event in self.source_events:
            self.associated_events.add_hierarchy(event)

    def __repr__(self) -> str:
        return f"UserExpectation({self.kind.name}, start={self.start}, end={self.end})"

    @property
    def title(self) -> str:
        return self.kind.value

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def range(self) -> Range:
        return Range(self.start, self.end)

    def contains_start_of(self, event: TraceEvent) -> bool:
        """Half-open test: start <= event.start < end.

        An event starting exactly at this expectation's end belongs to
        whatever comes next.
        """
        return self.start <= event.start < self.end

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable summary."""
        return {
            "title": self.title,
            "kind": self.kind.name,
            "start": self.start,
            "end": self.end,
            "source_event_count": len(self.source_events),
            "associated_event_count": len(self.associated_events),
        }
