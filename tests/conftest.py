"""Shared pytest fixtures for rangeiter tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest
from typer.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rangeiter.config import DEFAULT_LIMIT_ENV, LOG_LEVEL_ENV  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(DEFAULT_LIMIT_ENV, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
