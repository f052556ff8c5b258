"""usermodel: user expectation analysis for browser traces.

Splits a trace timeline into Startup, Load, Response (input) and Idle
expectations and assigns every trace event to the expectation it belongs to.

Usage:
    from usermodel import DetectorSet, LocalTrace, build_user_model, detector

    @detector
    def find_load_expectations(helper):
        ...

    trace = LocalTrace()
    trace.add_process(1, "Browser")
    trace.add_event("MessageLoop::RunTask", 0.0, 40.0, pid=1)

    build_user_model(trace, DetectorSet(load=find_load_expectations))
    for expectation in trace.user_model.expectations:
        print(expectation.title, expectation.start, expectation.end)
"""

__version__ = "0.1.0"

# Builder
from usermodel.builder import (
    BuildResult,
    BuildStage,
    OverlappingExpectationsError,
    UserModelBuilder,
    build_user_model,
    collect_unassociated_events,
    find_idle_expectations,
)

# Configuration
from usermodel.config import BuilderSettings

# Core primitives
from usermodel.core import (
    EventKind,
    EventSet,
    ExpectationKind,
    Range,
    TraceEvent,
    UserExpectation,
    find_empty_ranges_between_ranges,
)

# Coverage
from usermodel.coverage import ExpectationCoverage, get_expectation_coverage

# Detection
from usermodel.detection import (
    DetectionFailure,
    DetectionResult,
    DetectionSuccess,
    Detector,
    DetectorSet,
    detector,
    failure,
    success,
)

# Trace model
from usermodel.trace import (
    ImportWarningRecord,
    LocalTrace,
    ModelHelper,
    TraceModel,
    UserModel,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EventKind",
    "EventSet",
    "TraceEvent",
    "Range",
    "find_empty_ranges_between_ranges",
    "ExpectationKind",
    "UserExpectation",
    # Detection
    "Detector",
    "DetectorSet",
    "DetectionResult",
    "DetectionSuccess",
    "DetectionFailure",
    "detector",
    "success",
    "failure",
    # Builder
    "UserModelBuilder",
    "build_user_model",
    "BuildResult",
    "BuildStage",
    "OverlappingExpectationsError",
    "find_idle_expectations",
    "collect_unassociated_events",
    # Trace
    "TraceModel",
    "ModelHelper",
    "LocalTrace",
    "UserModel",
    "ImportWarningRecord",
    # Config
    "BuilderSettings",
    # Coverage
    "ExpectationCoverage",
    "get_expectation_coverage",
]
