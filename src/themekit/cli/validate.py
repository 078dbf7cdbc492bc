"""CLI command: themekit validate -- check a JSON rule specification."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from themekit.cli.spec_file import echo_diagnostics, load_spec
from themekit.errors import ThemeError
from themekit.validation import validate as run_validate


@click.command()
@click.argument("specfile", type=click.Path(exists=True))
@click.option(
    "--known",
    multiple=True,
    help="Declared theme class; when given, other placeholders are reported",
)
def validate(specfile: str, known: tuple[str, ...]) -> None:
    """Check SPECFILE and list what would go wrong when building it.

    The exit status is 1 when any ERROR diagnostic is reported.
    """
    path = Path(specfile)
    try:
        spec = load_spec(path)
    except ThemeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(spec, known=set(known) or None)
    errors = echo_diagnostics(diagnostics, path.name)
    sys.exit(1 if errors else 0)
