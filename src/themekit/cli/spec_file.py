"""Reading rule specifications and writing built themes."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

import click

from themekit.errors import ThemeSpecError
from themekit.model import Theme
from themekit.stylemodule import StyleModule
from themekit.validation import Diagnostic, Severity


def load_spec(path: Path) -> dict[str, Any]:
    """Load a JSON rule specification from *path*."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ThemeSpecError(
            f"{path.name} is not valid JSON (line {e.lineno}, column {e.colno})"
        ) from e
    if not isinstance(data, dict):
        raise ThemeSpecError(f"{path.name} must contain a JSON object")
    return data


def echo_theme(theme: Theme, fmt: str) -> None:
    """Print *theme* as CSS text or as a JSON document."""
    if fmt == "json":
        payload = {"scope": theme.scope, "rules": theme.mapping()}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        click.echo(StyleModule(theme).get_rules())


def echo_diagnostics(diagnostics: list[Diagnostic], source: str) -> int:
    """Print *diagnostics* and a per-severity tally; return the error count."""
    if not diagnostics:
        click.echo(f"{source}: no problems found")
        return 0
    for diag in diagnostics:
        click.echo(str(diag))
    counts = Counter(d.severity for d in diagnostics)
    tally = " ".join(f"{sev.value.lower()}={counts[sev]}" for sev in Severity)
    click.echo(f"{source}: {tally}")
    return counts[Severity.ERROR]
