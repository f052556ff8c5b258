"""User model builder: detectors, then idle synthesis, then the association sweep.

Usage:
    detectors = DetectorSet(
        startup=find_startup_expectations,
        load=find_load_expectations,
        input=find_input_expectations,
    )

    # Pure: compute without touching the trace model
    result = UserModelBuilder(trace, detectors).find_user_expectations()

    # Or compute and commit in one step
    build_user_model(trace, detectors)
    trace.user_model.expectations
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from usermodel.builder.association import collect_unassociated_events
from usermodel.builder.idle import find_idle_expectations
from usermodel.config import BuilderSettings
from usermodel.core.expectation import CATCH_ALL_KINDS, UserExpectation, expectations_to_ranges
from usermodel.core.ranges import find_overlapping_pairs
from usermodel.detection import (
    DetectionFailure,
    DetectionResult,
    DetectorSet,
    failure,
    normalize_detection,
    success,
)
from usermodel.trace.models import ImportWarningRecord
from usermodel.trace.protocol import ModelHelper, TraceModel


class BuildStage(Enum):
    """Where a build pass ended. Stages only move forward."""

    NOT_STARTED = auto()
    SKIPPED = auto()
    """Trace lacks browser activity; nothing to do."""
    DETECTING = auto()
    GAP_SYNTHESIS = auto()
    ASSOCIATION = auto()
    COMMITTED = auto()
    FAILED = auto()
    """A detector failed; nothing is committed."""


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of one build pass.

    Attributes:
        stage: Final stage: COMMITTED, SKIPPED or FAILED.
        expectations: Expectations in detection order (Startup, Load, Input,
            then Idle). Empty unless stage is COMMITTED.
        warning: Import warning for a FAILED pass, else None.
    """

    stage: BuildStage
    expectations: tuple[UserExpectation, ...] = ()
    warning: ImportWarningRecord | None = None

    @property
    def succeeded(self) -> bool:
        return self.stage is BuildStage.COMMITTED

    @property
    def is_noop(self) -> bool:
        return self.stage is BuildStage.SKIPPED


class OverlappingExpectationsError(ValueError):
    """Raised when catch-all expectations share time."""

    def __init__(self, first: UserExpectation, second: UserExpectation) -> None:
        super().__init__(
            f"{first.title} expectation [{first.start}, {first.end}) overlaps "
            f"{second.title} expectation [{second.start}, {second.end})"
        )
        self.first = first
        self.second = second


def validate_catch_all_disjoint(expectations: list[UserExpectation]) -> None:
    """Check that no two catch-all expectations overlap.

    Raises:
        OverlappingExpectationsError: For the first overlapping pair found.
    """
    catch_all = [e for e in expectations if e.kind in CATCH_ALL_KINDS]
    pairs = find_overlapping_pairs(expectations_to_ranges(catch_all))
    if pairs:
        i, j = pairs[0]
        raise OverlappingExpectationsError(catch_all[i], catch_all[j])


class UserModelBuilder:
    """Builds the user expectations of one trace model.

    Args:
        model: Trace model to analyse and, on build_user_model(), commit into.
        detectors: Startup, load and input detectors. Defaults to detectors
            that find nothing, which yields a single Idle expectation.
        settings: Builder configuration. Defaults to BuilderSettings().
        logger: Logger for stage transitions. Defaults to this module's logger.
    """

    def __init__(
        self,
        model: TraceModel,
        detectors: DetectorSet | None = None,
        settings: BuilderSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._model = model
        self._detectors = detectors or DetectorSet()
        self._settings = settings or BuilderSettings()
        self._logger = logger or logging.getLogger(__name__)
        self._stage = BuildStage.NOT_STARTED

    @staticmethod
    def supports_model_helper(model_helper: Any) -> bool:
        """Check whether a model helper exposes browser activity."""
        return getattr(model_helper, "browser_helper", None) is not None

    @property
    def stage(self) -> BuildStage:
        """Stage reached by the most recent pass."""
        return self._stage

    def _enter(self, stage: BuildStage) -> None:
        self._logger.debug("UserModelBuilder: %s -> %s", self._stage.name, stage.name)
        self._stage = stage

    def find_user_expectations(self) -> BuildResult:
        """Run one pass without mutating the trace model.

        Returns:
            BuildResult with stage SKIPPED (no browser activity), FAILED (with
            a warning) or COMMITTED (with expectations).
        """
        self._stage = BuildStage.NOT_STARTED
        model_helper = self._model.model_helper
        if model_helper is None or not self.supports_model_helper(model_helper):
            self._enter(BuildStage.SKIPPED)
            return BuildResult(BuildStage.SKIPPED)

        self._enter(BuildStage.DETECTING)
        detected = self._detect(model_helper)
        if isinstance(detected, DetectionFailure):
            self._enter(BuildStage.FAILED)
            return BuildResult(
                BuildStage.FAILED,
                warning=ImportWarningRecord(
                    source=self._settings.warning_source,
                    message=detected.reason,
                    show_to_user=self._settings.show_warnings_to_user,
                ),
            )
        expectations = list(detected.expectations)

        self._enter(BuildStage.GAP_SYNTHESIS)
        idle = find_idle_expectations(
            expectations, self._model.bounds, self._settings.insignificant_ms
        )
        expectations.extend(idle)
        self._logger.debug("UserModelBuilder: synthesized %d idle expectations", len(idle))

        self._enter(BuildStage.ASSOCIATION)
        collect_unassociated_events(expectations, self._model.all_events())

        self._enter(BuildStage.COMMITTED)
        return BuildResult(BuildStage.COMMITTED, tuple(expectations))

    def _detect(self, model_helper: ModelHelper) -> DetectionResult:
        """Run every detector in order; the first failure aborts detection.

        A detector that raises, or returns something normalize_detection
        rejects, counts as failed.
        """
        expectations: list[UserExpectation] = []
        for name, find in self._detectors.in_order():
            try:
                result = normalize_detection(find(model_helper))
            except Exception as e:
                result = failure(e)
            if isinstance(result, DetectionFailure):
                self._logger.warning(
                    "UserModelBuilder: %s detector failed: %s", name, result.reason
                )
                return result
            self._logger.debug(
                "UserModelBuilder: %s detector found %d expectations",
                name,
                len(result.expectations),
            )
            expectations.extend(result.expectations)

        if self._settings.reject_overlapping_catch_all:
            try:
                validate_catch_all_disjoint(expectations)
            except OverlappingExpectationsError as e:
                self._logger.warning("UserModelBuilder: %s", e)
                return failure(e)
        return success(expectations)

    def build_user_model(self) -> BuildResult:
        """Run one pass and apply its single effect to the trace model.

        COMMITTED appends every expectation to model.user_model; FAILED records
        one import warning; SKIPPED changes nothing.
        """
        result = self.find_user_expectations()
        if result.succeeded:
            self._model.user_model.commit(result.expectations)
        elif result.warning is not None:
            self._model.import_warning(result.warning)
        return result


def build_user_model(
    model: TraceModel,
    detectors: DetectorSet | None = None,
    settings: BuilderSettings | None = None,
    logger: logging.Logger | None = None,
) -> BuildResult:
    """Build and commit the user model of a trace in one call."""
    return UserModelBuilder(model, detectors, settings, logger).build_user_model()
