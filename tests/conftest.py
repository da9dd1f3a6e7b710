"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    if str(_SRC_PATH) not in sys.path:
        sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def scheduler_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Config rooted in a per-test temp directory with default file names."""
    from core.config import SchedulerConfig

    monkeypatch.delenv("SCHEDULER_SCHEDULES_FILE", raising=False)
    monkeypatch.delenv("SCHEDULER_COMPLETED_FILE", raising=False)
    monkeypatch.setenv("SCHEDULER_DATA_ROOT", str(tmp_path))
    return SchedulerConfig.from_env()
