"""Run command - spawn the interpreter inside its package root."""

import sys

import click

from ...context import pass_context
from ...errors import PyshimError
from ...models import BUFFER_INTEROP
from ...process_utils import run_python
from ..helpers import PASSTHROUGH_SETTINGS, fail, plan_for


def _exit_status(code: int) -> int:
    """Map a child return code to a shell exit status (signal N -> 128 + N)."""
    if code < 0:
        return 128 - code
    return code


@click.command(context_settings=PASSTHROUGH_SETTINGS)
@click.option(
    "--buffer",
    is_flag=True,
    help="Capture output and print it once the interpreter exits",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def run(ctx, buffer, args):
    """Run Python with ARGS, isolating user installs under the package root.

    The package root is the nearest directory above the script containing
    package.json. PYTHONUSERBASE points at its python_modules directory.
    Exits with the interpreter's exit code.

    Examples:
        pyshim run src/main.py input.csv
        pyshim run -O -X dev src/main.py
        pyshim --package-dir . run -m pip install --user requests

    Note:
        Use '--' before ARGS that pyshim itself would parse, e.g.:
          pyshim run -- --version
    """
    plan = plan_for(ctx, args)

    try:
        result = run_python(
            args,
            env=plan.env,
            interop=BUFFER_INTEROP if buffer else None,
            throw_non_zero_status=False,
            python=ctx.python,
        )
    except (PyshimError, OSError) as e:
        fail(e)

    if buffer:
        click.echo(result.stdout, nl=False)
        click.echo(result.stderr, nl=False, err=True)
        sys.exit(_exit_status(result.code))

    sys.exit(_exit_status(result))
