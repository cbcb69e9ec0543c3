"""Tests for JobRegistry."""

from __future__ import annotations

import pytest

from jobmock.errors import JobNotFoundError
from jobmock.jobs import JobRecord, JobRegistry


def _record(name: str = "j1", command: str = "echo") -> JobRecord:
    return JobRecord(name=name, parent="", command=command)


class TestJobRegistry:
    def test_put_and_get(self):
        registry = JobRegistry()
        record = _record()
        assert registry.put(record) is None
        assert registry.get("j1") is record
        assert "j1" in registry
        assert len(registry) == 1

    def test_put_overwrites_and_returns_previous(self):
        registry = JobRegistry()
        first, second = _record(command="a"), _record(command="b")
        registry.put(first)
        assert registry.put(second) is first
        assert registry.require("j1") is second
        assert len(registry) == 1

    def test_get_missing(self):
        assert JobRegistry().get("nope") is None

    def test_require_missing(self):
        with pytest.raises(JobNotFoundError, match="Job with ID nope not found"):
            JobRegistry().require("nope")

    def test_remove(self):
        registry = JobRegistry()
        record = _record()
        registry.put(record)
        assert registry.remove("j1") is record
        assert "j1" not in registry
        with pytest.raises(JobNotFoundError):
            registry.remove("j1")

    def test_values_is_snapshot(self):
        registry = JobRegistry()
        registry.put(_record("a"))
        registry.put(_record("b"))
        snapshot = registry.values()
        registry.remove("a")
        assert [r.name for r in snapshot] == ["a", "b"]
        assert [r.name for r in registry.values()] == ["b"]

    def test_iter_and_clear(self):
        registry = JobRegistry()
        registry.put(_record("a"))
        registry.put(_record("b"))
        assert list(registry) == ["a", "b"]
        registry.clear()
        assert len(registry) == 0
        assert repr(registry) == "JobRegistry(0 jobs)"
