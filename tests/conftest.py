"""
Shared pytest fixtures for jobmock tests.

This module provides:
- Settings cache isolation (each test reads a fresh environment)
- Quiet logging defaults for CLI tests
- Client fixtures for the local and stub runners
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure jobmock package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jobmock.jobs import LocalJobsClient, LocalProcessRunner, StubCommandRunner
from jobmock.logging import clear_context
from jobmock.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without an explicit unit/integration marker as unit."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Fresh settings per test, no stray .env, quiet logs."""
    monkeypatch.chdir(tmp_path)
    for var in ("JOBMOCK_RUNNER", "JOBMOCK_SHELL", "JOBMOCK_INHERIT_ENV",
                "JOBMOCK_DEFAULT_PARENT", "JOBMOCK_CREATOR", "JOBMOCK_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("JOBMOCK_LOG_LEVEL", "ERROR")
    clear_settings_cache()
    clear_context()
    yield
    clear_settings_cache()
    clear_context()


# =============================================================================
# Clients
# =============================================================================


@pytest.fixture()
def local_client() -> LocalJobsClient:
    """Client that runs real subprocesses."""
    return LocalJobsClient(runner=LocalProcessRunner())


@pytest.fixture()
def stub_runner() -> StubCommandRunner:
    return StubCommandRunner(stdout="stub output\n")


@pytest.fixture()
def stub_client(stub_runner: StubCommandRunner) -> LocalJobsClient:
    """Client whose runs never leave the process."""
    return LocalJobsClient(runner=stub_runner)

