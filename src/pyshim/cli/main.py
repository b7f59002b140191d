"""pyshim CLI main entry point with global options."""

import logging

import click

from .. import __version__
from ..context import ShimContext


@click.group()
@click.option(
    "--package-dir",
    type=click.Path(file_okay=False),
    help="Package root (skips the search for package.json)",
)
@click.option(
    "--python", "python", help="Interpreter to run (overrides $PYSHIM_PYTHON)"
)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution and spawn details")
@click.version_option(version=__version__, prog_name="pyshim")
@click.pass_context
def cli(ctx, package_dir, python, verbose):
    """pyshim - run Python with a per-package user site."""
    ctx.ensure_object(ShimContext)
    ctx.obj.package_dir = package_dir
    ctx.obj.python = python

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s"
        )


# Register commands at module level so tests can import cli with commands attached
from .commands.env import env
from .commands.locate import locate
from .commands.run import run

cli.add_command(run)
cli.add_command(locate)
cli.add_command(env)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
