"""Test session configuration."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest


@pytest.fixture
def calls() -> list[str]:
    """Record of side effects performed by continuations."""
    return []


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture the package's debug events."""
    caplog.set_level(logging.DEBUG, logger="statedo")
    return caplog


@pytest.fixture
def record(calls: list[str]) -> Callable[[str], None]:
    """Append a label to ``calls``."""
    return calls.append
