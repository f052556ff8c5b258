"""Association sweep: hand leftover events to the catch-all expectation they start in.

After detection, most trace events belong to no expectation. Startup, Load and
Idle expectations act as catch-all regions: each top-level thread slice no
detector claimed goes, with its whole subtree, to the catch-all expectation
whose span contains the slice's start.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from usermodel.core.event import TraceEvent
from usermodel.core.expectation import CATCH_ALL_KINDS, UserExpectation, get_covered_events


def collect_unassociated_events(
    expectations: Sequence[UserExpectation],
    all_events: Iterable[TraceEvent],
) -> None:
    """Add unclaimed top-level events to the containing catch-all expectation.

    Mutates associated_events of catch-all expectations only. Catch-all
    expectations are scanned in the given order and the first one with
    start <= event.start < end wins. Callers keep catch-all spans disjoint, so
    the scan order only breaks ties that cannot occur in a valid build.
    Events with no containing expectation stay unassociated.

    Args:
        expectations: Every expectation of the build, in detection order.
        all_events: Every event of the trace, in trace order.
    """
    catch_all = [e for e in expectations if e.kind in CATCH_ALL_KINDS]
    if not catch_all:
        return

    covered = get_covered_events(expectations)

    for event in all_events:
        if not event.is_thread_slice or not event.is_top_level:
            continue
        if event in covered:
            continue
        for expectation in catch_all:
            if expectation.contains_start_of(event):
                expectation.associated_events.add_hierarchy(event)
                break
