"""Tests for CLI Ensure utility class."""

import pytest

from act.cli.ensure import Ensure, exit_with_error
from act.core.context import ActContext
from act.core.errors import DispatchError, UnknownCommandError
from tests.fakes.host import FakeHost


class TestEnsureDispatchSucceeds:
    """Tests for Ensure.dispatch_succeeds method."""

    def test_returns_value_on_success(self) -> None:
        result = Ensure.dispatch_succeeds(lambda: 42)
        assert result == 42

    def test_exits_on_dispatch_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        def operation() -> int:
            raise UnknownCommandError("frobnicate")

        with pytest.raises(SystemExit) as exc_info:
            Ensure.dispatch_succeeds(operation)

        assert exc_info.value.code == 1
        err_lines = capsys.readouterr().err.splitlines()
        assert err_lines == [
            "Error: Unknown command: frobnicate",
            'Run "act help" to see available commands.',
        ]

    def test_other_exceptions_propagate(self) -> None:
        def operation() -> int:
            raise KeyError("not a dispatch error")

        with pytest.raises(KeyError):
            Ensure.dispatch_succeeds(operation)


class TestEnsureEnvironmentReady:
    """Tests for Ensure.environment_ready method."""

    def test_passes_with_all_tools(self) -> None:
        Ensure.environment_ready(ActContext.for_test())

    def test_missing_tool_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        ctx = ActContext.for_test(host=FakeHost(installed_tools={"bash": "/bin/bash", "git": "/g"}))

        with pytest.raises(SystemExit) as exc_info:
            Ensure.environment_ready(ctx)

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert 'Required dependency "jq" not found on PATH.' in err
        assert "Install it and try again." in err


def test_exit_with_error_without_hints(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        exit_with_error(DispatchError("Something broke"))

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "Error: Something broke\n"
