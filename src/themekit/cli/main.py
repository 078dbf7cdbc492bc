"""themekit CLI entry point: Click group with subcommands."""

import logging

import click

from themekit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="themekit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """themekit - expand editor theme classes into scoped CSS."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from themekit.cli.base import base  # noqa: E402
from themekit.cli.build import build  # noqa: E402
from themekit.cli.classes import classes  # noqa: E402
from themekit.cli.validate import validate  # noqa: E402

cli.add_command(classes)
cli.add_command(build)
cli.add_command(validate)
cli.add_command(base)
