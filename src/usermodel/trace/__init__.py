"""Host trace model: protocols, the user model, and an in-memory implementation.

Usage:
    from usermodel.trace import LocalTrace, TraceModel

    trace = LocalTrace()
    trace.add_process(1, "Browser")
    isinstance(trace, TraceModel)  # True
"""

from usermodel.trace.local import ChromeModelHelper, LocalTrace
from usermodel.trace.models import BrowserHelper, ImportWarningRecord, UserModel
from usermodel.trace.protocol import ModelHelper, TraceModel

__all__ = [
    "BrowserHelper",
    "ChromeModelHelper",
    "ImportWarningRecord",
    "LocalTrace",
    "ModelHelper",
    "TraceModel",
    "UserModel",
]
