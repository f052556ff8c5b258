"""Detector interface and result types.

The startup, load and input heuristics live outside this package; they plug in
through DetectorSet.
"""

from usermodel.detection.protocol import Detector, DetectorSet, detector, find_nothing
from usermodel.detection.result import (
    DetectionFailure,
    DetectionResult,
    DetectionSuccess,
    DetectorReturn,
    failure,
    normalize_detection,
    success,
)

__all__ = [
    # Protocols
    "Detector",
    "DetectorSet",
    "detector",
    "find_nothing",
    # Results
    "DetectionResult",
    "DetectionSuccess",
    "DetectionFailure",
    "DetectorReturn",
    "success",
    "failure",
    "normalize_detection",
]
