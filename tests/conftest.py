from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A controllable clock so rotation can be driven by a simulated date.
3. An in-memory stream destination.
"""

import io
import os
import sys
from datetime import datetime, timedelta, timezone

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class FakeClock:
    """Callable clock returning a fixed moment until advanced."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at 2024-03-15 10:30:00 UTC."""
    return FakeClock(datetime(2024, 3, 15, 10, 30, 0, tzinfo=timezone.utc))


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory destination owned by the test."""
    return io.StringIO()
