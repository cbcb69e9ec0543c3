"""Tests for the jobmock error hierarchy."""

from __future__ import annotations

from jobmock.errors import (
    CommandSpawnError,
    ConfigError,
    ErrorCategory,
    JobMockError,
    JobNotFoundError,
)


class TestJobMockError:
    def test_defaults(self):
        err = JobMockError("boom")
        assert str(err) == "boom"
        assert err.category == ErrorCategory.UNKNOWN
        assert err.retryable is False
        assert err.context == {}

    def test_overrides(self):
        err = JobMockError("boom", category=ErrorCategory.CONFIG, retryable=True)
        assert err.category == ErrorCategory.CONFIG
        assert err.retryable is True

    def test_cause_is_chained(self):
        cause = ValueError("inner")
        err = JobMockError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError: inner"

    def test_with_context(self):
        err = JobMockError("boom").with_context(job_id="j1")
        assert err.context == {"job_id": "j1"}
        assert err.to_dict()["context"] == {"job_id": "j1"}

    def test_to_dict(self):
        data = ConfigError("bad runner").to_dict()
        assert data == {
            "error_type": "ConfigError",
            "message": "bad runner",
            "category": "CONFIG",
            "retryable": False,
        }


class TestJobNotFoundError:
    def test_message_and_id(self):
        err = JobNotFoundError("j1")
        assert str(err) == "Job with ID j1 not found"
        assert err.job_id == "j1"
        assert err.category == ErrorCategory.NOT_FOUND
        assert err.context["job_id"] == "j1"

    def test_is_lookup_error(self):
        err = JobNotFoundError("j1")
        assert isinstance(err, LookupError)
        assert isinstance(err, JobMockError)

    def test_repr(self):
        assert repr(JobNotFoundError("j1")) == (
            "JobNotFoundError('Job with ID j1 not found', category=NOT_FOUND)"
        )


class TestCommandSpawnError:
    def test_command_in_context(self):
        err = CommandSpawnError("Command not found: foo", command="foo")
        assert err.category == ErrorCategory.SPAWN
        assert err.command == "foo"
        assert err.context == {"command": "foo"}

    def test_without_command(self):
        err = CommandSpawnError("boom")
        assert err.command is None
        assert err.context == {}


class TestErrorCategory:
    def test_members(self):
        assert {c.value for c in ErrorCategory} == {"NOT_FOUND", "SPAWN", "CONFIG", "UNKNOWN"}
