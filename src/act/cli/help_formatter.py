"""Sectioned command listing for the top-level help text."""

from collections.abc import Mapping

import click

from act.core.registry import CommandEntry, CommandRegistry

META_SECTION = "Meta"


def format_command_sections(
    formatter: click.HelpFormatter,
    registry: CommandRegistry,
    builtins: Mapping[str, click.Command],
) -> None:
    """Write one help section per registry section, then the built-ins under "Meta".

    Grouped commands are expanded to one row per sub-command
    ("lessons pull", "lessons check", ...). Built-ins keep their
    registration order.
    """
    for section, entries in registry.sections().items():
        rows: list[tuple[str, str]] = []
        for name, entry in entries:
            if isinstance(entry, CommandEntry):
                rows.append((f"{name} {entry.usage}".rstrip(), entry.summary))
                continue
            for sub_name, sub_entry in entry.subcommands.items():
                rows.append((f"{name} {sub_name}", sub_entry.summary))
        _write_section(formatter, section, rows)

    meta_rows = []
    for name, cmd in builtins.items():
        if cmd.hidden:
            continue
        meta_rows.append((name, cmd.get_short_help_str(limit=formatter.width)))
    _write_section(formatter, META_SECTION, meta_rows)


def _write_section(formatter: click.HelpFormatter, title: str, rows: list[tuple[str, str]]) -> None:
    if rows:
        with formatter.section(title):
            formatter.write_dl(rows)
