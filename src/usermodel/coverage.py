"""How much of a trace the committed user model accounts for.

Usage:
    build_user_model(trace, detectors)
    coverage = get_expectation_coverage(trace)
    if coverage is not None:
        print(f"{coverage.covered_events_count_ratio:.0%} of events associated")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from usermodel.core.event import TraceEvent
from usermodel.core.expectation import get_associated_events, get_unassociated_events
from usermodel.trace.protocol import TraceModel


@dataclass(frozen=True, slots=True)
class ExpectationCoverage:
    """Associated versus unassociated events of a trace.

    Attributes:
        associated_events_count: Events belonging to some expectation.
        unassociated_events_count: Every other event of the trace.
        associated_events_cpu_time_ms: CPU self time of associated events.
        unassociated_events_cpu_time_ms: CPU self time of the rest.
        covered_events_count_ratio: Associated share of all events.
        covered_events_cpu_time_ratio: Associated share of CPU time, None if
            the trace records no CPU time.
    """

    associated_events_count: int
    unassociated_events_count: int
    associated_events_cpu_time_ms: float
    unassociated_events_cpu_time_ms: float
    covered_events_count_ratio: float
    covered_events_cpu_time_ratio: float | None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "associated_events_count": self.associated_events_count,
            "unassociated_events_count": self.unassociated_events_count,
            "associated_events_cpu_time_ms": self.associated_events_cpu_time_ms,
            "unassociated_events_cpu_time_ms": self.unassociated_events_cpu_time_ms,
            "covered_events_count_ratio": self.covered_events_count_ratio,
            "covered_events_cpu_time_ratio": self.covered_events_cpu_time_ratio,
        }


def _total_cpu_time(events: Iterable[TraceEvent]) -> float:
    return sum(event.cpu_self_time or 0.0 for event in events)


def get_expectation_coverage(model: TraceModel) -> ExpectationCoverage | None:
    """Measure coverage of the expectations committed to model.

    Returns:
        Coverage figures, or None if no event is associated with any
        expectation (including when nothing has been committed).
    """
    associated = get_associated_events(model.user_model.expectations)
    if not associated:
        return None

    unassociated = get_unassociated_events(model.all_events(), associated)
    associated_cpu = _total_cpu_time(associated)
    unassociated_cpu = _total_cpu_time(unassociated)
    total_count = len(associated) + len(unassociated)
    total_cpu = associated_cpu + unassociated_cpu

    return ExpectationCoverage(
        associated_events_count=len(associated),
        unassociated_events_count=len(unassociated),
        associated_events_cpu_time_ms=associated_cpu,
        unassociated_events_cpu_time_ms=unassociated_cpu,
        covered_events_count_ratio=len(associated) / total_count,
        covered_events_cpu_time_ratio=associated_cpu / total_cpu if total_cpu else None,
    )
