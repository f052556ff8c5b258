"""User model build pipeline."""

from usermodel.builder.association import collect_unassociated_events
from usermodel.builder.builder import (
    BuildResult,
    BuildStage,
    OverlappingExpectationsError,
    UserModelBuilder,
    build_user_model,
    validate_catch_all_disjoint,
)
from usermodel.builder.idle import INSIGNIFICANT_MS, find_idle_expectations

__all__ = [
    # Builder
    "UserModelBuilder",
    "build_user_model",
    "BuildResult",
    "BuildStage",
    "OverlappingExpectationsError",
    "validate_catch_all_disjoint",
    # Stages
    "find_idle_expectations",
    "collect_unassociated_events",
    "INSIGNIFICANT_MS",
]
