"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and shared check
doubles. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os

import pytest

from fieldstate import Failure, Result, Success

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class RecordingCheck:
    """Check-function double that records every raw string it receives.

    Parses with ``int`` and rejects anything unparseable with ``message``.
    """

    message: str = "bad"
    calls: list[str] = field(default_factory=list)

    def __call__(self, raw: str) -> Result[int, str]:
        self.calls.append(raw)
        try:
            return Success(int(raw))
        except ValueError:
            return Failure(self.message)


@pytest.fixture
def recording_check() -> RecordingCheck:
    """Return a fresh RecordingCheck (not autouse)."""
    return RecordingCheck()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_fieldstate_env(request, monkeypatch):
    """Clear FIELDSTATE_* env vars so dev flags start off in every test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FIELDSTATE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def dev_validation(monkeypatch):
    """Enable dev-time payload validation for one test (not autouse)."""
    monkeypatch.setenv("FIELDSTATE_VALIDATE", "1")
