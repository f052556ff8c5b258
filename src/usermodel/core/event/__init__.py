"""Trace events and identity-keyed event sets."""

from usermodel.core.event.models import EventKind, EventSet, TraceEvent

__all__ = [
    "EventKind",
    "EventSet",
    "TraceEvent",
]
