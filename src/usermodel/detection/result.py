"""Detector outcomes.

Detectors report failure as a value instead of raising, so the builder can
abort a pass without relying on stack unwinding.

Usage:
    def find_load_expectations(helper):
        if not commits:
            return success()
        return success([UserExpectation(ExpectationKind.LOAD, start, end, commits)])

    result = find_load_expectations(helper)
    if isinstance(result, DetectionFailure):
        print(result.reason)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from usermodel.core.expectation import UserExpectation


@dataclass(frozen=True, slots=True)
class DetectionSuccess:
    """Detector ran to completion. Empty expectations are a valid outcome."""

    expectations: tuple[UserExpectation, ...] = ()


@dataclass(frozen=True, slots=True)
class DetectionFailure:
    """Detector could not make sense of the trace."""

    reason: str


DetectionResult = DetectionSuccess | DetectionFailure

DetectorReturn = (
    None
    | DetectionSuccess
    | DetectionFailure
    | list[UserExpectation]  # [expectation, ...]
    | tuple[UserExpectation, ...]
)


def success(expectations: Iterable[UserExpectation] = ()) -> DetectionSuccess:
    """Wrap detected expectations, preserving their order."""
    return DetectionSuccess(tuple(expectations))


def failure(reason: str | BaseException) -> DetectionFailure:
    """Build a failure from a message or the exception that caused it."""
    return DetectionFailure(str(reason))


def normalize_detection(raw: DetectorReturn) -> DetectionResult:
    """Convert any valid detector return format to a DetectionResult.

    Supports:
    - None: nothing detected
    - DetectionSuccess / DetectionFailure: passthrough
    - list or tuple of UserExpectation: success, order preserved

    Args:
        raw: Detector return value in any supported format.

    Returns:
        Normalized DetectionResult.

    Raises:
        TypeError: If the value is not a recognized format.
    """
    if raw is None:
        return success()

    if isinstance(raw, (DetectionSuccess, DetectionFailure)):
        return raw

    if isinstance(raw, (list, tuple)):
        for item in raw:
            if not isinstance(item, UserExpectation):
                raise TypeError(f"Expected UserExpectation, got {type(item).__name__}")
        return success(raw)

    raise TypeError(f"Invalid detector return type: {type(raw).__name__}")
