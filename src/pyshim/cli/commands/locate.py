"""Locate command - show how ARGS would be resolved."""

import json

import click

from ...context import USER_BASE_VAR, pass_context
from ..helpers import PASSTHROUGH_SETTINGS, plan_for


@click.command(context_settings=PASSTHROUGH_SETTINGS)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def locate(ctx, args):
    """Print the source argument, package root and user base for ARGS as JSON."""
    plan = plan_for(ctx, args)
    click.echo(
        json.dumps(
            {
                "source_arg": plan.source_arg,
                "package_dir": plan.package_dir,
                "user_base": plan.env[USER_BASE_VAR],
            },
            indent=2,
        )
    )
