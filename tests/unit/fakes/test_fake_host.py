"""Tests for FakeHost and FakeScriptRunner test infrastructure."""

import pytest

from act.core.errors import LaunchFailureError
from tests.fakes.host import FakeHost
from tests.fakes.script_runner import FakeScriptRunner


def test_fake_host_defaults() -> None:
    host = FakeHost()

    assert host.platform() == "linux"
    assert host.read_kernel_version() is None
    assert host.which("git") is None


def test_fake_host_tracks_which_calls() -> None:
    host = FakeHost(installed_tools={"git": "/usr/bin/git"})

    assert host.which("git") == "/usr/bin/git"
    assert host.which("jq") is None
    assert host.which_calls == ["git", "jq"]


def test_fake_runner_records_argv_and_returns_exit_code() -> None:
    runner = FakeScriptRunner(exit_code=5)

    assert runner.run(["bash", "/tk/scripts/a.sh", "x"]) == 5
    assert runner.run_calls == [["bash", "/tk/scripts/a.sh", "x"]]


def test_fake_runner_launch_error() -> None:
    runner = FakeScriptRunner(launch_error="boom")

    with pytest.raises(LaunchFailureError):
        runner.run(["bash"])

    assert runner.run_calls == [["bash"]]
