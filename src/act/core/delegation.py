"""Hand a resolved command off to its script and report the exit status."""

import logging
from pathlib import Path

from act.core.config import ToolkitConfig
from act.core.errors import ScriptNotFoundError
from act.core.registry import CommandEntry, Invocation, build_argv
from act.core.runner.abc import ScriptRunner

logger = logging.getLogger(__name__)


def resolve_script(config: ToolkitConfig, entry: CommandEntry) -> Path:
    return config.toolkit_root / entry.target


def delegate(
    config: ToolkitConfig,
    runner: ScriptRunner,
    entry: CommandEntry,
    invocation: Invocation,
) -> int:
    """Run the entry's script with the invocation's arguments.

    The script is run once, through the configured shell, with the entry's
    fixed arguments ahead of the user's arguments.

    Returns:
        The script's exit status

    Raises:
        ScriptNotFoundError: If the script is missing from the toolkit root
        LaunchFailureError: If the shell could not be started
    """
    script_path = resolve_script(config, entry)
    if not script_path.is_file():
        raise ScriptNotFoundError(script_path)

    argv = build_argv(config.shell, script_path, entry, invocation.remaining_args)
    logger.debug(
        "Delegating command=%s sub_command=%s argv=%s",
        invocation.command_name,
        invocation.sub_command_name,
        argv,
    )
    return runner.run(argv)
