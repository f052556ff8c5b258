"""User expectation model and event bookkeeping."""

from usermodel.core.expectation.models import CATCH_ALL_KINDS, ExpectationKind, UserExpectation
from usermodel.core.expectation.operations import (
    expectations_to_ranges,
    get_associated_events,
    get_covered_events,
    get_unassociated_events,
)

__all__ = [
    "CATCH_ALL_KINDS",
    "ExpectationKind",
    "UserExpectation",
    "expectations_to_ranges",
    "get_associated_events",
    "get_covered_events",
    "get_unassociated_events",
]
