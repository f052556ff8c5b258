"""Protocols for the host trace model.

The builder only reads from a trace model, apart from one commit into its user
model or one import warning. Any object providing these members can host a
build.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from usermodel.core.event import TraceEvent
    from usermodel.core.ranges import Range
    from usermodel.trace.models import ImportWarningRecord, UserModel


@runtime_checkable
class ModelHelper(Protocol):
    """Capability view over a trace model, handed to detectors."""

    @property
    def model(self) -> TraceModel:
        """The trace model this helper describes."""
        ...

    @property
    def browser_helper(self) -> Any | None:
        """Browser-process helper, or None if the trace has no browser activity."""
        ...


@runtime_checkable
class TraceModel(Protocol):
    """Event store plus the outputs a user model build writes to."""

    def all_events(self) -> Iterable[TraceEvent]:
        """Iterate every event of the trace, children included, in trace order."""
        ...

    @property
    def bounds(self) -> Range | None:
        """Min start to max end over all events. None if the trace is empty."""
        ...

    @property
    def model_helper(self) -> ModelHelper | None:
        """Helper exposing trace capabilities, or None if unavailable."""
        ...

    @property
    def user_model(self) -> UserModel:
        """Persistent expectation list."""
        ...

    def import_warning(self, record: ImportWarningRecord) -> None:
        """Record a non-fatal warning."""
        ...
