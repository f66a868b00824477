"""Pytest fixtures shared by the checkpoint test-suite."""
from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def descriptor_env(monkeypatch):  # noqa: D401
    """Make sure CHECKPOINT_DESCRIPTOR_FILE never leaks in from the host."""
    monkeypatch.delenv("CHECKPOINT_DESCRIPTOR_FILE", raising=False)
    return monkeypatch
