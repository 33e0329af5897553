import logging
import os

import click

from act.cli.commands.meta import help_cmd, version_cmd
from act.cli.dispatch import DispatchGroup, ensure_context

DEBUG_ENV = "ACT_DEBUG"


# The root takes no options of its own: DispatchGroup routes the raw argv,
# so "-h", "--help", "-v" and "--version" only count as the first token.
@click.group(cls=DispatchGroup, name="act", add_help_option=False)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Autonomous Coding Toolkit command dispatcher."""
    ensure_context(ctx)


# Built-ins, listed under "Meta" in registration order
cli.add_command(version_cmd)
cli.add_command(help_cmd)


def configure_logging() -> None:
    """Enable debug logging if ACT_DEBUG environment variable is set."""
    if os.environ.get(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def main() -> None:
    """CLI entry point used by the `act` console script."""
    configure_logging()
    cli(prog_name="act")
