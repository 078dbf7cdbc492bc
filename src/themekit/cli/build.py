"""CLI command: themekit build -- build a JSON rule specification."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themekit.builder import ThemeBuilder
from themekit.cli.spec_file import echo_theme, load_spec
from themekit.config import DEFAULT_CONFIG
from themekit.errors import ThemeError
from themekit.names import CounterNames
from themekit.validation import validate_or_raise


@click.command()
@click.argument("specfile", type=click.Path(exists=True))
@click.option("--scope", default=None, help="Scope token (generated when omitted)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["css", "json"]),
    default="css",
    help="Output format",
)
@click.option("--prefix", default=None, help="DOM class prefix (default: cm-)")
@click.option("--check/--no-check", default=True, help="Validate before building")
def build(
    specfile: str,
    scope: str | None,
    fmt: str,
    prefix: str | None,
    check: bool,
) -> None:
    """Build a rule specification file into scoped CSS rules.

    SPECFILE is a JSON object mapping placeholder selectors to declaration
    blocks.
    """
    config = DEFAULT_CONFIG.with_overrides(class_prefix=prefix)
    builder = ThemeBuilder(CounterNames(config.scope_prefix), prefix=config.class_prefix)

    try:
        spec = load_spec(Path(specfile))
        if check:
            for warning in validate_or_raise(spec):
                click.echo(f"  {warning}", err=True)
        theme = builder.build(spec, scope=scope)
    except ThemeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    echo_theme(theme, fmt)
