"""Unit tests for P4DescribeReader (subprocess is mocked)."""

from __future__ import annotations

import json
import subprocess
from unittest.mock import patch

import pytest

from swarm_relay.application.ports.change_description import ChangeDescriptionError
from swarm_relay.infrastructure.adapters.p4.describe_reader import P4DescribeReader

RUN = "swarm_relay.infrastructure.adapters.p4.describe_reader.subprocess.run"


def _completed(stdout: str, returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestP4DescribeReader:
    """Tests for describe()."""

    def test_returns_description(self) -> None:
        output = json.dumps({"change": "12", "desc": "Big import #noswarm\n"}) + "\n"
        with patch(RUN, return_value=_completed(output)) as run:
            description = P4DescribeReader(p4_command=["p4", "-p", "ssl:p4:1666"]).describe("12")

        assert "#noswarm" in description
        args = run.call_args.args[0]
        assert args[:3] == ["p4", "-p", "ssl:p4:1666"]
        assert args[-1] == "12"
        assert "describe" in args

    def test_non_zero_exit(self) -> None:
        with patch(RUN, return_value=_completed("", returncode=1, stderr="no such change")):
            with pytest.raises(ChangeDescriptionError):
                P4DescribeReader().describe("99")

    def test_p4_missing(self) -> None:
        with patch(RUN, side_effect=FileNotFoundError("p4")):
            with pytest.raises(ChangeDescriptionError):
                P4DescribeReader().describe("12")

    def test_timeout(self) -> None:
        with patch(RUN, side_effect=subprocess.TimeoutExpired("p4", 5)):
            with pytest.raises(ChangeDescriptionError):
                P4DescribeReader(timeout_seconds=5).describe("12")

    def test_bad_output(self) -> None:
        with patch(RUN, return_value=_completed("not json")):
            with pytest.raises(ChangeDescriptionError):
                P4DescribeReader().describe("12")
