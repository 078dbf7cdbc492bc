"""CLI command: themekit classes -- print DOM classes for theme class names."""

from __future__ import annotations

import sys

import click

from themekit.config import DEFAULT_CONFIG
from themekit.errors import ThemeClassError
from themekit.names import theme_class


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--prefix", default=None, help="DOM class prefix (default: cm-)")
def classes(names: tuple[str, ...], prefix: str | None) -> None:
    """Print the class attribute value for each theme class NAME.

    One line per name, least specific class first.
    """
    config = DEFAULT_CONFIG.with_overrides(class_prefix=prefix)
    for name in names:
        try:
            click.echo(theme_class(name, config.class_prefix))
        except ThemeClassError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
