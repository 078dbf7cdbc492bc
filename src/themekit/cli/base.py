"""CLI command: themekit base -- print the default editor theme."""

from __future__ import annotations

import click

from themekit.base import base_theme
from themekit.cli.spec_file import echo_theme
from themekit.config import DEFAULT_CONFIG
from themekit.names import CounterNames


@click.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["css", "json"]),
    default="css",
    help="Output format",
)
def base(fmt: str) -> None:
    """Print the default editor theme under a fresh scope."""
    theme = base_theme(CounterNames(DEFAULT_CONFIG.scope_prefix))
    echo_theme(theme, fmt)
