"""Configuration settings using Pydantic Settings.

Usage:
    from usermodel.config import BuilderSettings

    # Load from environment variables (USERMODEL_*)
    settings = BuilderSettings()

    # Or override with explicit values
    settings = BuilderSettings(insignificant_ms=0.5)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuilderSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the user model builder.

    Attributes:
        insignificant_ms: Idle gaps this long or shorter are dropped.
        reject_overlapping_catch_all: Fail the pass when detected startup/load
            expectations overlap, instead of letting detection order decide
            where leftover events go.
        warning_source: Source name on import warnings.
        show_warnings_to_user: show_to_user flag on import warnings.

    Environment Variables:
        USERMODEL_INSIGNIFICANT_MS
        USERMODEL_REJECT_OVERLAPPING_CATCH_ALL
        USERMODEL_WARNING_SOURCE
        USERMODEL_SHOW_WARNINGS_TO_USER
    """

    model_config = SettingsConfigDict(
        env_prefix="USERMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    insignificant_ms: float = Field(default=1.0, ge=0.0)
    reject_overlapping_catch_all: bool = True
    warning_source: str = "UserModelBuilder"
    show_warnings_to_user: bool = True
