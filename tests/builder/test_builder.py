"""Tests for UserModelBuilder orchestration.

Why these tests exist:
- A failed detector must leave the trace model untouched apart from one warning
- Traces without browser activity must not be touched at all
- Committed order is detection order, never time order
"""

import logging

import pytest

from usermodel import (
    BuilderSettings,
    BuildStage,
    DetectorSet,
    ExpectationKind,
    LocalTrace,
    UserExpectation,
    UserModelBuilder,
    build_user_model,
    detector,
    failure,
    success,
)
from usermodel.builder import OverlappingExpectationsError, validate_catch_all_disjoint


def _returning(*expectations):
    def find(helper):
        return success(expectations)

    return find


def _failing(reason):
    def find(helper):
        return failure(reason)

    return find


@pytest.fixture
def populated(trace) -> LocalTrace:
    """Browser trace spanning [0, 100]."""
    trace.add_event("RunTask", 0.0, 2.0, pid=1)
    trace.add_event("RunTask", 98.0, 100.0, pid=1)
    return trace


def test_missing_browser_is_silent_noop(headless_trace) -> None:
    calls = []

    def find(helper):
        calls.append(helper)
        return success()

    result = build_user_model(headless_trace, DetectorSet(startup=find, load=find, input=find))

    assert result.stage is BuildStage.SKIPPED
    assert result.is_noop
    assert calls == []
    assert headless_trace.user_model.expectations == []
    assert headless_trace.warnings == []


def test_supports_model_helper(trace, headless_trace) -> None:
    assert UserModelBuilder.supports_model_helper(trace.model_helper)
    assert not UserModelBuilder.supports_model_helper(headless_trace.model_helper)
    assert not UserModelBuilder.supports_model_helper(None)


def test_browser_added_after_construction_is_seen(headless_trace) -> None:
    builder = UserModelBuilder(headless_trace)
    assert builder.find_user_expectations().stage is BuildStage.SKIPPED

    headless_trace.add_process(1, "Browser")

    assert builder.find_user_expectations().stage is BuildStage.COMMITTED


def test_plain_raising_detector_fails_pass(populated) -> None:
    def find_load(helper):
        raise RuntimeError("load heuristics crashed")

    result = build_user_model(populated, DetectorSet(load=find_load))

    assert result.stage is BuildStage.FAILED
    assert populated.user_model.expectations == []
    assert len(populated.warnings) == 1
    assert populated.warnings[0].message == "load heuristics crashed"


@pytest.mark.parametrize(
    "returned",
    [[], (), None],
    ids=["list", "tuple", "none"],
)
def test_plain_detector_empty_returns_are_accepted(populated, returned) -> None:
    result = build_user_model(populated, DetectorSet(load=lambda helper: returned))

    assert result.succeeded
    assert [e.kind for e in populated.user_model.expectations] == [ExpectationKind.IDLE]


def test_plain_detector_list_is_committed_in_order(populated) -> None:
    load = UserExpectation(ExpectationKind.LOAD, 30.0, 40.0)

    result = build_user_model(populated, DetectorSet(load=lambda helper: [load]))

    assert result.succeeded
    assert populated.user_model.expectations[0] is load


@pytest.mark.parametrize(
    "returned",
    ["not expectations", [UserExpectation(ExpectationKind.LOAD, 0.0, 1.0), "stray"]],
    ids=["string", "mixed-list"],
)
def test_invalid_detector_return_fails_pass(populated, returned) -> None:
    result = build_user_model(populated, DetectorSet(input=lambda helper: returned))

    assert result.stage is BuildStage.FAILED
    assert populated.user_model.expectations == []
    assert len(populated.warnings) == 1


def test_detectors_run_in_fixed_order_on_same_helper(populated) -> None:
    seen = []

    def recording(name):
        def find(helper):
            seen.append((name, helper))
            return success()

        return find

    detectors = DetectorSet(
        input=recording("input"), load=recording("load"), startup=recording("startup")
    )
    build_user_model(populated, detectors)

    assert [name for name, _ in seen] == ["startup", "load", "input"]
    assert all(helper is populated.model_helper for _, helper in seen)


def test_committed_order_is_detection_order(populated) -> None:
    startup = UserExpectation(ExpectationKind.STARTUP, 60.0, 70.0)
    load = UserExpectation(ExpectationKind.LOAD, 30.0, 40.0)
    response = UserExpectation(ExpectationKind.INPUT, 5.0, 10.0)
    detectors = DetectorSet(
        startup=_returning(startup), load=_returning(load), input=_returning(response)
    )

    result = build_user_model(populated, detectors)

    kinds = [e.kind for e in populated.user_model.expectations]
    assert kinds == [
        ExpectationKind.STARTUP,
        ExpectationKind.LOAD,
        ExpectationKind.INPUT,
        ExpectationKind.IDLE,
        ExpectationKind.IDLE,
        ExpectationKind.IDLE,
        ExpectationKind.IDLE,
    ]
    assert populated.user_model.expectations[:3] == [startup, load, response]
    idle_spans = [(e.start, e.end) for e in populated.user_model.expectations[3:]]
    assert idle_spans == [(0.0, 5.0), (10.0, 30.0), (40.0, 60.0), (70.0, 100.0)]
    assert result.expectations == tuple(populated.user_model.expectations)


def test_load_failure_commits_nothing_and_warns_once(populated) -> None:
    populated.user_model.commit([UserExpectation(ExpectationKind.IDLE, 0.0, 1.0)])
    before = len(populated.user_model.expectations)
    detectors = DetectorSet(
        startup=_returning(UserExpectation(ExpectationKind.STARTUP, 0.0, 10.0)),
        load=_failing("Load detector could not find a navigation"),
    )

    result = build_user_model(populated, detectors)

    assert result.stage is BuildStage.FAILED
    assert result.expectations == ()
    assert len(populated.user_model.expectations) == before
    assert len(populated.warnings) == 1
    warning = populated.warnings[0]
    assert warning.source == "UserModelBuilder"
    assert warning.message == "Load detector could not find a navigation"
    assert warning.show_to_user is True


def test_failure_stops_later_detectors(populated) -> None:
    calls = []

    def find_input(helper):
        calls.append("input")
        return success()

    build_user_model(populated, DetectorSet(load=_failing("boom"), input=find_input))

    assert calls == []


def test_raising_detector_adapted_with_decorator(populated) -> None:
    @detector
    def find_startup(helper):
        raise RuntimeError("Startup heuristics crashed")

    result = build_user_model(populated, DetectorSet(startup=find_startup))

    assert result.stage is BuildStage.FAILED
    assert populated.warnings[0].message == "Startup heuristics crashed"
    assert populated.user_model.expectations == []


def test_failed_pass_can_be_retried(populated) -> None:
    attempts = []

    def flaky(helper):
        attempts.append(1)
        if len(attempts) == 1:
            return failure("transient")
        return success()

    builder = UserModelBuilder(populated, DetectorSet(load=flaky))

    assert builder.build_user_model().stage is BuildStage.FAILED
    assert builder.build_user_model().stage is BuildStage.COMMITTED
    assert len(populated.user_model.expectations) == 1
    assert len(populated.warnings) == 1


def test_find_user_expectations_does_not_mutate_model(populated) -> None:
    builder = UserModelBuilder(populated)

    result = builder.find_user_expectations()

    assert result.succeeded
    assert [(e.kind, e.start, e.end) for e in result.expectations] == [
        (ExpectationKind.IDLE, 0.0, 100.0)
    ]
    assert populated.user_model.expectations == []
    assert builder.stage is BuildStage.COMMITTED


def test_empty_trace_with_browser_commits_nothing(trace) -> None:
    result = build_user_model(trace)

    assert result.stage is BuildStage.COMMITTED
    assert result.expectations == ()
    assert trace.user_model.expectations == []


def test_overlapping_catch_all_fails_pass(populated) -> None:
    detectors = DetectorSet(
        startup=_returning(UserExpectation(ExpectationKind.STARTUP, 0.0, 30.0)),
        load=_returning(UserExpectation(ExpectationKind.LOAD, 20.0, 50.0)),
    )

    result = build_user_model(populated, detectors)

    assert result.stage is BuildStage.FAILED
    assert "overlaps" in populated.warnings[0].message
    assert populated.user_model.expectations == []


def test_overlap_check_can_be_disabled(populated) -> None:
    startup = UserExpectation(ExpectationKind.STARTUP, 0.0, 30.0)
    load = UserExpectation(ExpectationKind.LOAD, 20.0, 50.0)
    task = populated.add_event("RunTask", 25.0, 26.0, pid=1)
    settings = BuilderSettings(reject_overlapping_catch_all=False)

    result = build_user_model(
        populated, DetectorSet(startup=_returning(startup), load=_returning(load)), settings
    )

    assert result.succeeded
    assert task in startup.associated_events
    assert task not in load.associated_events


def test_input_overlapping_load_is_allowed() -> None:
    load = UserExpectation(ExpectationKind.LOAD, 0.0, 30.0)
    response = UserExpectation(ExpectationKind.INPUT, 10.0, 20.0)

    validate_catch_all_disjoint([load, response])

    with pytest.raises(OverlappingExpectationsError) as excinfo:
        validate_catch_all_disjoint([load, UserExpectation(ExpectationKind.STARTUP, 29.0, 31.0)])
    assert excinfo.value.first is load


def test_settings_shape_warning_and_threshold(populated) -> None:
    settings = BuilderSettings(
        insignificant_ms=5.0, warning_source="Importer", show_warnings_to_user=False
    )
    load = UserExpectation(ExpectationKind.LOAD, 3.0, 50.0)

    ok = UserModelBuilder(populated, DetectorSet(load=_returning(load)), settings)
    spans = [(e.start, e.end) for e in ok.find_user_expectations().expectations]
    assert spans == [(3.0, 50.0), (50.0, 100.0)]

    failed = UserModelBuilder(populated, DetectorSet(load=_failing("nope")), settings)
    warning = failed.find_user_expectations().warning
    assert warning is not None
    assert warning.source == "Importer"
    assert warning.show_to_user is False


def test_injected_logger_receives_stage_transitions(populated, caplog) -> None:
    log = logging.getLogger("tests.usermodel")

    with caplog.at_level(logging.DEBUG, logger="tests.usermodel"):
        UserModelBuilder(populated, logger=log).build_user_model()

    messages = [record.getMessage() for record in caplog.records]
    assert "UserModelBuilder: NOT_STARTED -> DETECTING" in messages
    assert "UserModelBuilder: ASSOCIATION -> COMMITTED" in messages


def test_detector_failure_logged_as_warning(populated, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="usermodel.builder.builder"):
        build_user_model(populated, DetectorSet(input=_failing("no input events")))

    assert any(
        record.levelno == logging.WARNING and "input detector failed" in record.getMessage()
        for record in caplog.records
    )
