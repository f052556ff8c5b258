"""Local in-memory trace model.

List-based event store suitable for tests, examples and small traces that were
already parsed by some other tool.

Usage:
    trace = LocalTrace()
    trace.add_process(1, "Browser")
    task = trace.add_event("MessageLoop::RunTask", 0.0, 12.0, pid=1)
    trace.add_event("Layout", 2.0, 5.0, parent=task, pid=1)

    build_user_model(trace, detectors)
    trace.user_model.expectations
"""

from __future__ import annotations

from collections.abc import Iterator

from usermodel.core.event import EventKind, TraceEvent
from usermodel.core.ranges import Range
from usermodel.trace.models import BrowserHelper, ImportWarningRecord, UserModel

BROWSER_PROCESS_NAME = "Browser"


class ChromeModelHelper:
    """Capability view over a LocalTrace.

    browser_helper is set when the trace has a process named "Browser".
    """

    def __init__(self, model: LocalTrace) -> None:
        self._model = model
        self._browser_helper = self._find_browser_helper()

    def _find_browser_helper(self) -> BrowserHelper | None:
        for pid, name in self._model.processes.items():
            if name == BROWSER_PROCESS_NAME:
                return BrowserHelper(pid=pid, name=name)
        return None

    @property
    def model(self) -> LocalTrace:
        return self._model

    @property
    def browser_helper(self) -> BrowserHelper | None:
        return self._browser_helper


class LocalTrace:
    """Simple in-memory trace model.

    Structure:
        _events: every event, children included, in insertion order
        processes: pid -> process name
    """

    def __init__(self) -> None:
        self._events: list[TraceEvent] = []
        self.processes: dict[int, str] = {}
        self._user_model = UserModel()
        self._warnings: list[ImportWarningRecord] = []
        self._helper: ChromeModelHelper | None = None

    def add_process(self, pid: int, name: str) -> None:
        """Register a process name. Invalidates the cached model helper."""
        self.processes[pid] = name
        self._helper = None

    def add_event(
        self,
        title: str,
        start: float,
        end: float,
        *,
        parent: TraceEvent | None = None,
        kind: EventKind = EventKind.THREAD_SLICE,
        category: str = "",
        pid: int | None = None,
        cpu_self_time: float | None = None,
    ) -> TraceEvent:
        """Create an event and add it to the trace.

        Args:
            title: Event name.
            start: Start timestamp (ms).
            end: End timestamp (ms).
            parent: Owning event; must already be in this trace.
            kind: Record kind. Only thread slices may have a parent.
            category: Trace category.
            pid: Process id. Defaults to the parent's pid.
            cpu_self_time: CPU self time (ms).

        Returns:
            The new event.

        Raises:
            ValueError: If the parent is foreign or the nesting is invalid.
        """
        if parent is not None:
            if parent not in self._events:
                raise ValueError(f"Parent {parent!r} is not part of this trace")
            if kind is not EventKind.THREAD_SLICE or not parent.is_thread_slice:
                raise ValueError("Only thread slices can be nested")
            if pid is None:
                pid = parent.pid

        event = TraceEvent(
            title=title,
            start=start,
            end=end,
            kind=kind,
            category=category,
            pid=pid,
            cpu_self_time=cpu_self_time,
        )
        if parent is not None:
            parent.add_child(event)
        self._events.append(event)
        return event

    def all_events(self) -> Iterator[TraceEvent]:
        return iter(self._events)

    @property
    def bounds(self) -> Range | None:
        if not self._events:
            return None
        return Range(
            min(event.start for event in self._events),
            max(event.end for event in self._events),
        )

    @property
    def model_helper(self) -> ChromeModelHelper:
        if self._helper is None:
            self._helper = ChromeModelHelper(self)
        return self._helper

    @property
    def user_model(self) -> UserModel:
        return self._user_model

    def import_warning(self, record: ImportWarningRecord) -> None:
        self._warnings.append(record)

    @property
    def warnings(self) -> list[ImportWarningRecord]:
        """Import warnings recorded so far (copy)."""
        return list(self._warnings)
