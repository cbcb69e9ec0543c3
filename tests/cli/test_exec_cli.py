"""Tests for jobmock.cli.app — ``jobmock exec`` and the root callback."""

from __future__ import annotations

import sys

import pytest
from typer.testing import CliRunner

from jobmock.cli.app import app

runner = CliRunner()


def _exec(*args: str):
    return runner.invoke(app, ["exec", *args])


class TestRoot:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "jobmock 0.1.0" in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "exec" in result.output


@pytest.mark.integration
class TestExecLocal:
    def test_success_json(self):
        result = _exec("--json", "j1", "echo", "Hello, World!")
        assert result.exit_code == 0, result.output
        assert '"status": "COMPLETED"' in result.output
        assert "Hello, World!" in result.output
        assert '"resource_name": "projects/local/locations/local/jobs/j1"' in result.output

    def test_success_table(self):
        result = _exec("j1", "echo", "rendered")
        assert result.exit_code == 0, result.output
        assert "COMPLETED" in result.output
        assert "Output:" in result.output
        assert "rendered" in result.output

    def test_missing_executable_exits_1(self):
        result = _exec("--json", "j1", "/nonexistent/path/to/binary-xyz")
        assert result.exit_code == 1
        assert '"status": "FAILED"' in result.output
        assert "Command not found" in result.output

    def test_env_and_dash_dash(self):
        result = _exec(
            "--json", "--env", "SCENE_FILE=scene.blend", "--",
            "render", sys.executable, "-c", "import os; print(os.environ['SCENE_FILE'])",
        )
        assert result.exit_code == 0, result.output
        assert "scene.blend" in result.output

    def test_shell_flag(self):
        result = _exec("--json", "--shell", "j1", 'echo "Updated Command!"')
        assert result.exit_code == 0, result.output
        assert "Updated Command!" in result.output


class TestExecOptions:
    def test_stub_runner_from_environment(self, monkeypatch):
        monkeypatch.setenv("JOBMOCK_RUNNER", "stub")
        result = _exec(
            "--json", "--parent", "projects/p/locations/l", "--label", "team=render", "j1", "anything",
        )
        assert result.exit_code == 0, result.output
        assert '"resource_name": "projects/p/locations/l/jobs/j1"' in result.output
        assert '"team": "render"' in result.output

    def test_creator_from_environment(self, monkeypatch):
        monkeypatch.setenv("JOBMOCK_RUNNER", "stub")
        monkeypatch.setenv("JOBMOCK_CREATOR", "ci-bot")
        result = _exec("--json", "j1", "anything")
        assert '"creator": "ci-bot"' in result.output

    def test_malformed_env_pair(self):
        result = _exec("--env", "NOEQUALS", "j1", "echo")
        assert result.exit_code == 2

    def test_unknown_runner(self, monkeypatch):
        monkeypatch.setenv("JOBMOCK_RUNNER", "docker")
        result = _exec("j1", "echo")
        assert result.exit_code == 1
        assert "Unknown runner" in result.output

    def test_missing_command_argument(self):
        result = _exec("j1")
        assert result.exit_code == 2
