"""Detector protocol and the ordered detector set consumed by the builder."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from usermodel.detection.result import DetectionResult, failure, success

if TYPE_CHECKING:
    from usermodel.core.expectation import UserExpectation
    from usermodel.trace.protocol import ModelHelper


@runtime_checkable
class Detector(Protocol):
    """Finds expectations of one kind in a trace.

    Implementations must not mutate the trace; every detector of a pass sees
    the same snapshot.
    """

    def __call__(self, helper: ModelHelper) -> DetectionResult:
        """Scan the trace behind helper.

        Args:
            helper: Capability view of the trace model.

        Returns:
            DetectionSuccess with expectations in detection order, or
            DetectionFailure with a reason.
        """
        ...


def detector(func: Callable[[ModelHelper], Sequence[UserExpectation]]) -> Detector:
    """Adapt an exception-raising detector function into a Detector.

    Usage:
        @detector
        def find_startup_expectations(helper):
            ...
            return [UserExpectation(ExpectationKind.STARTUP, 0.0, ready.end)]

    Returned sequences become DetectionSuccess. Any Exception raised by func
    becomes DetectionFailure carrying str(exception).
    """

    @functools.wraps(func)
    def wrapper(helper: ModelHelper) -> DetectionResult:
        try:
            expectations = func(helper)
        except Exception as e:
            return failure(e)
        return success(expectations)

    return wrapper


def find_nothing(helper: ModelHelper) -> DetectionResult:
    """Detector for a slot the caller does not fill."""
    return success()


@dataclass(frozen=True, slots=True)
class DetectorSet:
    """The three detectors of a build, run in Startup, Load, Input order."""

    startup: Detector = field(default=find_nothing)
    load: Detector = field(default=find_nothing)
    input: Detector = field(default=find_nothing)

    def in_order(self) -> Iterator[tuple[str, Detector]]:
        """Yield (name, detector) in the fixed execution order."""
        yield "startup", self.startup
        yield "load", self.load
        yield "input", self.input
