"""Output routing for the dispatcher.

user_output: diagnostics for humans, written to stderr.
machine_output: help and version text, written to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a diagnostic message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write normal command output to stdout."""
    click.echo(message, nl=nl)
