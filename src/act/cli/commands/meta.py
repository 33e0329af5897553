"""Built-in commands that never touch the environment gate."""

import click

from act.cli.dispatch import ensure_context
from act.cli.output import machine_output
from act.core.config import ToolkitConfig

# Trailing arguments are accepted and ignored, matching `act help <anything>`.
BUILTIN_SETTINGS = dict(ignore_unknown_options=True, allow_extra_args=True)


def format_version(config: ToolkitConfig) -> str:
    return f"act v{config.version}"


@click.command("version", context_settings=BUILTIN_SETTINGS, add_help_option=False)
@click.pass_context
def version_cmd(ctx: click.Context) -> None:
    """Print version"""
    machine_output(format_version(ensure_context(ctx).config))


@click.command("help", context_settings=BUILTIN_SETTINGS, add_help_option=False)
@click.pass_context
def help_cmd(ctx: click.Context) -> None:
    """Show this help text"""
    root = ctx.find_root()
    machine_output(root.get_help())
