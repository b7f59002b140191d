"""CLI helper utilities shared across commands."""

import sys

import click

from ..errors import PyshimError
from ..launcher import resolve_launch

# Interpreter arguments are forwarded untouched, options included.
PASSTHROUGH_SETTINGS = dict(
    ignore_unknown_options=True, allow_interspersed_args=False
)


def fail(error: Exception) -> None:
    """Report error on stderr and exit with status 1.

    Raises:
        SystemExit: Always
    """
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def plan_for(ctx, args):
    """Resolve the launch plan for args, exiting on failure."""
    try:
        return resolve_launch(args, package_dir=ctx.package_dir)
    except PyshimError as e:
        fail(e)
