"""Integration tests for RealScriptRunner and end-to-end delegation with real bash."""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from act.cli.cli import cli
from act.core.config import ToolkitConfig
from act.core.context import ActContext
from act.core.errors import LaunchFailureError
from act.core.host.real import RealHost
from act.core.registry import DEFAULT_REGISTRY
from act.core.runner.real import RealScriptRunner, normalize_returncode
from tests.test_utils.toolkit_helpers import create_toolkit

pytestmark = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")


@pytest.mark.parametrize("status", [0, 3, 255])
def test_run_returns_child_status(status: int) -> None:
    assert RealScriptRunner().run(["bash", "-c", f"exit {status}"]) == status


def test_signal_terminated_child_maps_to_128_plus_signal() -> None:
    assert RealScriptRunner().run(["bash", "-c", "kill -TERM $$"]) == 143


def test_missing_executable_is_launch_failure(tmp_path: Path) -> None:
    with pytest.raises(LaunchFailureError) as exc_info:
        RealScriptRunner().run([str(tmp_path / "no-such-shell")])

    assert exc_info.value.executable == str(tmp_path / "no-such-shell")


def test_normalize_returncode() -> None:
    assert normalize_returncode(0) == 0
    assert normalize_returncode(7) == 7
    assert normalize_returncode(-9) == 137


def test_cli_runs_real_script_and_propagates_status(tmp_path: Path) -> None:
    """'act lessons check a b' runs lesson-check.sh with --list a b and exits with its status."""
    args_file = tmp_path / "args.txt"
    script = f'printf "%s\\n" "$@" > "{args_file}"\nexit 3\n'
    root = create_toolkit(tmp_path / "toolkit", ["scripts/lesson-check.sh"], content=script)
    ctx = ActContext(
        config=ToolkitConfig(
            version="0.0.0-test",
            toolkit_root=root,
            shell="bash",
            required_tools=("bash",),
        ),
        registry=DEFAULT_REGISTRY,
        host=RealHost(),
        runner=RealScriptRunner(),
    )

    result = CliRunner().invoke(cli, ["lessons", "check", "a b", "--flag"], obj=ctx)

    assert result.exit_code == 3
    assert args_file.read_text(encoding="utf-8").splitlines() == ["--list", "a b", "--flag"]
