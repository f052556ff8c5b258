"""Host model data: the persistent user model and import warnings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from usermodel.core.expectation import UserExpectation


@dataclass(frozen=True, slots=True)
class ImportWarningRecord:
    """Non-fatal problem found while importing or analysing a trace.

    Attributes:
        source: Component that raised the warning.
        message: Human readable description.
        show_to_user: Whether a UI should surface the warning.
    """

    source: str
    message: str
    show_to_user: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"source": self.source, "message": self.message, "showToUser": self.show_to_user}


@dataclass
class UserModel:
    """Persistent list of user expectations owned by a trace model."""

    expectations: list[UserExpectation] = field(default_factory=list)

    def commit(self, expectations: Iterable[UserExpectation]) -> None:
        """Append a finished build's expectations, preserving their order."""
        self.expectations.extend(expectations)


@dataclass(frozen=True, slots=True)
class BrowserHelper:
    """Marks that a trace contains browser-process activity."""

    pid: int
    name: str = "Browser"
