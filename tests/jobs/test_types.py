"""Tests for job types."""

from __future__ import annotations

from datetime import UTC, datetime

from jobmock.jobs import CommandResult, CreateJobRequest, JobDefinition, JobRecord, JobStatus


class TestJobStatus:
    def test_values_match_names(self):
        assert [s.value for s in JobStatus] == [
            "CREATED", "RUNNING", "COMPLETED", "FAILED", "UPDATED",
        ]

    def test_str_comparison(self):
        assert JobStatus.COMPLETED == "COMPLETED"

    def test_is_terminal(self):
        assert JobStatus.COMPLETED.is_terminal
        assert JobStatus.FAILED.is_terminal
        assert not JobStatus.RUNNING.is_terminal
        assert not JobStatus.UPDATED.is_terminal


class TestJobRecord:
    def test_defaults(self):
        record = JobRecord(name="j1", parent="p", command="echo")
        assert record.status == JobStatus.CREATED
        assert record.creation_time.tzinfo is UTC
        assert record.creation_time <= datetime.now(UTC)
        assert record.execution_count == 0
        assert record.output is None
        assert record.update_time is None
        assert record.uid

    def test_uids_are_unique(self):
        a = JobRecord(name="a", parent="", command="x")
        b = JobRecord(name="a", parent="", command="x")
        assert a.uid != b.uid

    def test_resource_name(self):
        assert JobRecord(name="j1", parent="projects/p/locations/l", command="x").resource_name == (
            "projects/p/locations/l/jobs/j1"
        )
        assert JobRecord(name="j1", parent="", command="x").resource_name == "j1"

    def test_to_dict(self):
        record = JobRecord(name="j1", parent="p", command="echo", arguments=["hi"], env={"A": "1"})
        data = record.to_dict()
        assert data["status"] == "CREATED"
        assert data["resource_name"] == "p/jobs/j1"
        assert data["arguments"] == ["hi"]
        assert data["env"] == {"A": "1"}
        assert data["update_time"] is None
        assert data["exit_code"] is None
        assert isinstance(data["creation_time"], str)


class TestRequests:
    def test_create_request_defaults(self):
        request = CreateJobRequest(job_id="j1")
        assert request.job == JobDefinition()
        assert request.parent == ""
        assert request.validate_only is False

    def test_command_result(self):
        assert CommandResult(exit_code=0).succeeded
        assert not CommandResult(exit_code=1).succeeded
        assert CommandResult(exit_code=0).stdout == ""
