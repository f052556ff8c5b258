"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from usermodel import LocalTrace

BROWSER_PID = 1
RENDERER_PID = 2


@pytest.fixture
def trace():
    """Trace with a browser and a renderer process, no events yet."""
    trace = LocalTrace()
    trace.add_process(BROWSER_PID, "Browser")
    trace.add_process(RENDERER_PID, "Renderer")
    return trace


@pytest.fixture
def headless_trace():
    """Trace with events but no browser process."""
    trace = LocalTrace()
    trace.add_process(RENDERER_PID, "Renderer")
    trace.add_event("RunTask", 0.0, 10.0, pid=RENDERER_PID)
    return trace
