"""Trace event models.

Usage:
    parent = TraceEvent(title="MessageLoop::RunTask", start=0.0, end=10.0)
    child = TraceEvent(title="Layout", start=1.0, end=4.0)
    parent.add_child(child)

    events = EventSet()
    events.add_hierarchy(parent)  # parent and child
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum, auto


class EventKind(Enum):
    """Kind of trace record. Only thread slices form a parent/child hierarchy."""

    THREAD_SLICE = auto()
    """Synchronous slice on a thread; may own nested slices."""

    ASYNC_SLICE = auto()
    """Slice spanning threads or tasks (e.g. input latency)."""

    INSTANT = auto()
    """Zero-duration marker."""


class TraceEvent:
    """Single trace record with an owned, ordered set of child events.

    Events compare and hash by identity: two records with identical fields
    are still different events.

    Args:
        title: Event name as recorded in the trace.
        start: Start timestamp in milliseconds.
        end: End timestamp in milliseconds (must be >= start).
        kind: Record kind.
        category: Trace category string.
        pid: Owning process id, if known.
        cpu_self_time: CPU time spent in this event excluding children, in ms.

    Raises:
        ValueError: If end is before start.
    """

    __slots__ = ("title", "start", "end", "kind", "category", "pid", "cpu_self_time", "_parent", "_children")

    def __init__(
        self,
        title: str,
        start: float,
        end: float,
        kind: EventKind = EventKind.THREAD_SLICE,
        category: str = "",
        pid: int | None = None,
        cpu_self_time: float | None = None,
    ) -> None:
        if end < start:
            raise ValueError(f"Event '{title}' ends before it starts ({end} < {start})")
        self.title = title
        self.start = start
        self.end = end
        self.kind = kind
        self.category = category
        self.pid = pid
        self.cpu_self_time = cpu_self_time
        self._parent: TraceEvent | None = None
        self._children: list[TraceEvent] = []

    def __repr__(self) -> str:
        return f"TraceEvent(title={self.title!r}, start={self.start}, end={self.end})"

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def parent(self) -> TraceEvent | None:
        return self._parent

    @property
    def children(self) -> tuple[TraceEvent, ...]:
        return tuple(self._children)

    @property
    def is_top_level(self) -> bool:
        """True if no other event owns this one."""
        return self._parent is None

    @property
    def is_thread_slice(self) -> bool:
        return self.kind is EventKind.THREAD_SLICE

    def add_child(self, child: TraceEvent) -> None:
        """Attach child as the last descendant of this event.

        Called by trace stores while ingesting; events are not re-parented
        afterwards.

        Raises:
            ValueError: If child already has a parent or is this event.
        """
        if child is self:
            raise ValueError("An event cannot own itself")
        if child._parent is not None:
            raise ValueError(f"{child!r} already belongs to {child._parent!r}")
        child._parent = self
        self._children.append(child)

    def descendants(self) -> Iterator[TraceEvent]:
        """Iterate all descendants depth-first, in child order."""
        stack = list(reversed(self._children))
        while stack:
            event = stack.pop()
            yield event
            stack.extend(reversed(event._children))

    @property
    def entire_hierarchy(self) -> list[TraceEvent]:
        """This event followed by all of its descendants."""
        return [self, *self.descendants()]


class EventSet:
    """Insertion-ordered set of events keyed by identity."""

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[TraceEvent] = ()) -> None:
        self._events: dict[TraceEvent, None] = dict.fromkeys(events)

    def __contains__(self, event: object) -> bool:
        return event in self._events

    def __iter__(self) -> Iterator[TraceEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"EventSet({list(self._events)!r})"

    def add(self, event: TraceEvent) -> None:
        self._events[event] = None

    def add_event_set(self, events: Iterable[TraceEvent]) -> None:
        for event in events:
            self._events[event] = None

    def add_hierarchy(self, event: TraceEvent) -> None:
        """Add event together with every descendant."""
        self.add_event_set(event.entire_hierarchy)

    def to_list(self) -> list[TraceEvent]:
        return list(self._events)
