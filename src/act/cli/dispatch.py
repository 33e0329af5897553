"""Command routing from argv to a delegated script.

DispatchGroup is the top-level router. Built-in commands (help, version) are
resolved directly; every other name first passes the environment gate and is
then looked up in the registry from ActContext. Registry entries become
click commands on demand: a CommandEntry becomes a DelegatedCommand, and a
CommandGroup becomes a DelegatedGroup that routes its first argument to a
sub-command.

Delegated commands take their arguments verbatim. No option parsing happens
here, so flags such as --help reach the script unchanged.
"""

import logging

import click

from act.cli.ensure import Ensure, exit_with_error
from act.cli.help_formatter import format_command_sections
from act.core.context import ActContext, create_context
from act.core.delegation import delegate
from act.core.errors import MissingSubCommandError, UnknownCommandError, UnknownSubCommandError
from act.core.registry import CommandEntry, CommandGroup, Invocation

logger = logging.getLogger(__name__)


def ensure_context(ctx: click.Context) -> ActContext:
    """Return the ActContext for this invocation, creating it on first use.

    Tests supply their own context via CliRunner.invoke(obj=...).
    """
    root = ctx.find_root()
    if root.obj is None:
        root.obj = Ensure.dispatch_succeeds(create_context)
    return root.obj


class DelegatedCommand(click.Command):
    """A command that runs one toolkit script with the remaining argv."""

    def __init__(self, name: str, entry: CommandEntry, group_name: str | None = None) -> None:
        super().__init__(name, help=entry.summary, add_help_option=False)
        self.entry = entry
        self.group_name = group_name

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args

    def invoke(self, ctx: click.Context) -> None:
        act_ctx = ensure_context(ctx)
        if self.group_name is None:
            invocation = Invocation(self.name, None, tuple(ctx.args))
        else:
            invocation = Invocation(self.group_name, self.name, tuple(ctx.args))

        status = Ensure.dispatch_succeeds(
            lambda: delegate(act_ctx.config, act_ctx.runner, self.entry, invocation)
        )
        logger.debug("%s exited with %d", invocation.command_name, status)
        raise SystemExit(status)


class DelegatedGroup(click.Group):
    """A command whose first argument names one of its sub-commands."""

    def __init__(self, name: str, group: CommandGroup) -> None:
        super().__init__(
            name,
            help=group.summary,
            callback=self._require_subcommand,
            invoke_without_command=True,
            add_help_option=False,
            context_settings={"ignore_unknown_options": True},
        )
        self.group = group

    def _require_subcommand(self) -> None:
        ctx = click.get_current_context()
        if ctx.invoked_subcommand is None:
            exit_with_error(MissingSubCommandError(self.name or "", self.group.names))

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.group.names)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        entry = self.group.get(cmd_name)
        if entry is None:
            return None
        return DelegatedCommand(cmd_name, entry, group_name=self.name)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        cmd = self.get_command(ctx, cmd_name)
        if cmd is None:
            exit_with_error(UnknownSubCommandError(self.name or "", cmd_name, self.group.names))
        return cmd_name, cmd, args[1:]


# Exact first-token aliases for the built-ins. An empty first token means help.
BUILTIN_ALIASES = {
    "": "help",
    "-h": "help",
    "--help": "help",
    "-v": "version",
    "--version": "version",
}


class DispatchGroup(click.Group):
    """Top-level router.

    The argv is never option-parsed at this level. Its first token is
    matched exactly: no token, "", "help", "-h" and "--help" select the help
    built-in; "version", "-v" and "--version" select the version built-in.
    Built-ins run without the environment gate. Any other token, option-like
    ones such as "--" or "-vh" included, is gated and then looked up in the
    registry; unknown names exit 1 instead of raising a click usage error.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args

    def invoke(self, ctx: click.Context) -> None:
        with ctx:
            cmd_name, cmd, args = self.resolve_command(ctx, ctx.args)
            ctx.invoked_subcommand = cmd_name
            click.Command.invoke(self, ctx)
            sub_ctx = cmd.make_context(cmd_name, args, parent=ctx)
            with sub_ctx:
                sub_ctx.command.invoke(sub_ctx)

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        act_ctx = ensure_context(ctx)
        formatter.write(f"Autonomous Coding Toolkit v{act_ctx.config.version}\n")
        formatter.write_paragraph()
        formatter.write_usage(ctx.command_path, "<command> [options]")
        self.format_commands(ctx, formatter)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        format_command_sections(formatter, ensure_context(ctx).registry, self.commands)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return [*ensure_context(ctx).registry, *self.commands]

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        builtin = self.commands.get(cmd_name)
        if builtin is not None:
            return builtin

        entry = ensure_context(ctx).registry.get(cmd_name)
        if entry is None:
            return None
        if isinstance(entry, CommandGroup):
            return DelegatedGroup(cmd_name, entry)
        return DelegatedCommand(cmd_name, entry)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        token = args[0] if args else ""
        act_ctx = ensure_context(ctx)

        builtin_name = BUILTIN_ALIASES.get(token, token)
        builtin = self.commands.get(builtin_name)
        if builtin is not None:
            logger.debug("Built-in command %s, skipping environment gate", builtin_name)
            return builtin_name, builtin, args[1:]

        Ensure.environment_ready(act_ctx)

        cmd = self.get_command(ctx, token)
        if cmd is None:
            exit_with_error(UnknownCommandError(token))
        logger.debug("Resolved command %s", token)
        return token, cmd, args[1:]
