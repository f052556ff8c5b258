"""Configuration module using Pydantic Settings.

Usage:
    from usermodel.config import BuilderSettings

    settings = BuilderSettings(insignificant_ms=2.0)
"""

from usermodel.config.settings import BuilderSettings

__all__ = [
    "BuilderSettings",
]
