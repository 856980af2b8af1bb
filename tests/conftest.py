"""Pytest configuration for the nslog test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from nslog.core.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DEBUG patterns and NSLOG_* variables from the host out of the tests."""

    monkeypatch.delenv("DEBUG", raising=False)
    for name in list(os.environ):
        if name.startswith("NSLOG_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> LoggerRegistry:
    """A registry private to one test."""

    return LoggerRegistry()


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"
