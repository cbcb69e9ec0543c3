"""Tests for jobmock.cli.utils."""

from __future__ import annotations

import pytest
import typer

from jobmock.cli.utils import output_error, parse_pairs
from jobmock.errors import JobNotFoundError


class TestParsePairs:
    def test_none(self):
        assert parse_pairs(None, option="--env") == {}

    def test_pairs(self):
        assert parse_pairs(["A=1", "B=x=y", "C="], option="--env") == {"A": "1", "B": "x=y", "C": ""}

    @pytest.mark.parametrize("raw", ["NOEQUALS", "=value"])
    def test_malformed(self, raw):
        with pytest.raises(typer.BadParameter):
            parse_pairs([raw], option="--env")


class TestOutputError:
    def test_exits_with_code_1(self):
        with pytest.raises(typer.Exit) as exc_info:
            output_error(JobNotFoundError("j1"))
        assert exc_info.value.exit_code == 1
