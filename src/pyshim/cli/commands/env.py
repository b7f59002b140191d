"""Env command - print the interpreter environment for ARGS."""

import json
import os
import shlex

import click

from ...context import NO_USER_SITE_VAR, USER_BASE_VAR, pass_context
from ..helpers import PASSTHROUGH_SETTINGS, plan_for


@click.command(context_settings=PASSTHROUGH_SETTINGS)
@click.option("--json", "as_json", is_flag=True, help="Print the full environment as JSON")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def env(ctx, as_json, args):
    """Print the environment overrides for ARGS.

    Without --json the changes pyshim makes are printed as shell commands,
    e.g. eval "$(pyshim env src/main.py)".
    """
    plan = plan_for(ctx, args)
    if as_json:
        click.echo(json.dumps(plan.env, indent=2, sort_keys=True))
        return
    click.echo(f"export {USER_BASE_VAR}={shlex.quote(plan.env[USER_BASE_VAR])}")
    if NO_USER_SITE_VAR in os.environ:
        click.echo(f"unset {NO_USER_SITE_VAR}")
