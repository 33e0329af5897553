"""CLI error handling utilities with styled output.

This module provides the Ensure class for turning dispatcher failures into
consistent, user-friendly error messages. All errors use a red "Error:"
prefix, go to stderr, and exit with status 1.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn, TypeVar

import click

from act.cli.output import user_output
from act.core.environment import check_environment
from act.core.errors import DispatchError

if TYPE_CHECKING:
    from act.core.context import ActContext

T = TypeVar("T")


def exit_with_error(error: DispatchError) -> NoReturn:
    """Print a DispatchError with its hints and exit with status 1."""
    user_output(click.style("Error: ", fg="red") + error.message)
    for hint in error.hints:
        user_output(hint)
    raise SystemExit(1)


class Ensure:
    """Turns core-layer failures into styled exits with status 1."""

    @staticmethod
    def dispatch_succeeds(operation: Callable[[], T]) -> T:
        """Run operation, converting any DispatchError into a styled exit.

        Args:
            operation: Zero-argument callable from the core layer

        Returns:
            Whatever operation returns

        Raises:
            SystemExit: If operation raises DispatchError (with exit code 1)

        Example:
            >>> status = Ensure.dispatch_succeeds(
            ...     lambda: delegate(config, runner, entry, invocation)
            ... )
        """
        try:
            return operation()
        except DispatchError as e:
            exit_with_error(e)

    @staticmethod
    def environment_ready(ctx: "ActContext") -> None:
        """Ensure the host can run delegated scripts.

        Checks the platform first, then each required tool in manifest order,
        stopping at the first failure.

        Raises:
            SystemExit: If the platform is unsupported or a tool is missing
        """
        Ensure.dispatch_succeeds(lambda: check_environment(ctx.host, ctx.config))
