"""Build the user model of a small hand-written page-load trace.

Run with:
    python examples/page_load.py
"""

import logging

from usermodel import (
    DetectorSet,
    ExpectationKind,
    LocalTrace,
    UserExpectation,
    build_user_model,
    detector,
    get_expectation_coverage,
)

COMMIT_TITLE = "RenderFrameImpl::didCommitProvisionalLoad"


@detector
def find_load_expectations(helper):
    """Treat each commit as a load lasting until the next 100ms of work settles."""
    return [
        UserExpectation(ExpectationKind.LOAD, event.start, event.end + 100.0, [event])
        for event in helper.model.all_events()
        if event.title == COMMIT_TITLE
    ]


@detector
def find_input_expectations(helper):
    return [
        UserExpectation(ExpectationKind.INPUT, event.start, event.end, [event])
        for event in helper.model.all_events()
        if event.title.startswith("InputLatency::")
    ]


def create_trace() -> LocalTrace:
    trace = LocalTrace()
    trace.add_process(1, "Browser")
    trace.add_process(2, "Renderer")

    trace.add_event("BrowserMainLoop::CreateThreads", 0.0, 8.0, pid=1, cpu_self_time=7.5)
    commit = trace.add_event(COMMIT_TITLE, 20.0, 35.0, pid=2, cpu_self_time=3.0)
    trace.add_event("ParseHTML", 22.0, 30.0, parent=commit, cpu_self_time=8.0)
    trace.add_event("RunTask", 60.0, 90.0, pid=2, cpu_self_time=25.0)
    trace.add_event("InputLatency::MouseDown", 400.0, 430.0, pid=1)
    trace.add_event("RunTask", 410.0, 425.0, pid=2, cpu_self_time=12.0)
    trace.add_event("RunTask", 900.0, 905.0, pid=2, cpu_self_time=1.0)
    return trace


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    trace = create_trace()
    detectors = DetectorSet(load=find_load_expectations, input=find_input_expectations)
    result = build_user_model(trace, detectors)
    print(f"Build finished at stage {result.stage.name}")

    for expectation in trace.user_model.expectations:
        titles = ", ".join(event.title for event in expectation.associated_events)
        print(f"  {expectation.title:<8} [{expectation.start:7.1f}, {expectation.end:7.1f})  {titles}")

    coverage = get_expectation_coverage(trace)
    if coverage is not None:
        print(f"Associated {coverage.covered_events_count_ratio:.0%} of events")


if __name__ == "__main__":
    main()
