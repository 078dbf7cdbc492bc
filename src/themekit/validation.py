"""Rule specification validation.

Each rule is a function taking the list of walked specification entries and
returning a list of :class:`Diagnostic` objects.  Building a theme never runs
these checks; they exist for authoring tools and the ``validate`` command.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Collection, Iterator, Mapping

from themekit.builder import check_declaration, is_literal_at_rule, split_selector_list
from themekit.errors import SelectorError, ThemeClassError, ThemeError, ThemeSpecError
from themekit.model import RuleSpec
from themekit.names import split_theme_class
from themekit.selector import RootRef, ThemeClassRef, tokenize

__all__ = [
    "ALL_RULES",
    "Diagnostic",
    "Severity",
    "ValidationError",
    "validate",
    "validate_or_raise",
]


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a rule specification.

    Attributes:
        rule: Identifier of the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        path: Keys leading from the top of the specification to the entry.
    """

    rule: str
    severity: Severity
    message: str
    path: tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = f" [{' > '.join(self.path)}]" if self.path else ""
        return f"{self.severity.value}{location}: {self.message}"


class ValidationError(ThemeError):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


# ---------------------------------------------------------------------------
# Specification walk
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Entry:
    """One key of the specification with its position and role.

    ``kind`` is one of ``"rule"`` (top-level selector), ``"nested"``
    (``&`` selector), ``"property"``, ``"at"`` and ``"literal"`` (a
    declaration inside a verbatim at-rule such as ``@keyframes``).
    """

    kind: str
    key: str
    value: Any
    path: tuple[str, ...]


def walk(spec: RuleSpec, path: tuple[str, ...] = ()) -> Iterator[Entry]:
    for key, value in spec.items():
        key_path = path + (key,)
        if key.startswith("@"):
            yield Entry("at", key, value, key_path)
            if isinstance(value, Mapping):
                if is_literal_at_rule(key):
                    yield from _walk_literal(value, key_path)
                else:
                    yield from walk(value, key_path)
            continue
        yield Entry("rule", key, value, key_path)
        if isinstance(value, Mapping):
            yield from _walk_block(value, key_path)


def _walk_block(block: Mapping[str, Any], path: tuple[str, ...]) -> Iterator[Entry]:
    for prop, value in block.items():
        prop_path = path + (prop,)
        if "&" in prop:
            yield Entry("nested", prop, value, prop_path)
            if isinstance(value, Mapping):
                yield from _walk_block(value, prop_path)
        else:
            yield Entry("property", prop, value, prop_path)


def _walk_literal(block: Mapping[str, Any], path: tuple[str, ...]) -> Iterator[Entry]:
    for prop, value in block.items():
        prop_path = path + (prop,)
        if isinstance(value, Mapping):
            yield from _walk_literal(value, prop_path)
        else:
            yield Entry("literal", prop, value, prop_path)


def _selector_entries(entries: list[Entry]) -> Iterator[tuple[Entry, list]]:
    """Yield selector entries with their tokenized comma-separated parts."""
    for entry in entries:
        if entry.kind not in ("rule", "nested"):
            continue
        try:
            parts = [tokenize(part) for part in split_selector_list(entry.key)]
        except SelectorError:
            continue
        yield entry, parts


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

RuleFunc = Callable[[list[Entry]], list[Diagnostic]]


def check_selectors_parse(entries: list[Entry]) -> list[Diagnostic]:
    """Every selector must be tokenizable."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.kind not in ("rule", "nested"):
            continue
        try:
            tokenize(entry.key)
        except SelectorError as e:
            diagnostics.append(
                Diagnostic("selector_syntax", Severity.ERROR, str(e), entry.path)
            )
    return diagnostics


def check_empty_segments(entries: list[Entry]) -> list[Diagnostic]:
    """Theme class placeholders must not contain empty segments."""
    diagnostics: list[Diagnostic] = []
    for entry, parts in _selector_entries(entries):
        for segments in parts:
            for seg in segments:
                if not isinstance(seg, ThemeClassRef):
                    continue
                try:
                    split_theme_class(seg.name)
                except ThemeClassError:
                    diagnostics.append(
                        Diagnostic(
                            "empty_segment",
                            Severity.ERROR,
                            f"Theme class {seg.source!r} has an empty segment",
                            entry.path,
                        )
                    )
    return diagnostics


def check_rule_blocks(entries: list[Entry]) -> list[Diagnostic]:
    """Selectors and block at-rules must map to a block."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.kind in ("rule", "nested") and not isinstance(entry.value, Mapping):
            diagnostics.append(
                Diagnostic(
                    "rule_block",
                    Severity.ERROR,
                    f"Rule {entry.key!r} must map to a declaration block",
                    entry.path,
                )
            )
        elif entry.kind == "at" and not (
            entry.value is None or isinstance(entry.value, Mapping)
        ):
            diagnostics.append(
                Diagnostic(
                    "rule_block",
                    Severity.ERROR,
                    f"At-rule {entry.key!r} must map to a block or None",
                    entry.path,
                )
            )
    return diagnostics


def check_nested_objects(entries: list[Entry]) -> list[Diagnostic]:
    """Plain properties must hold primitive values."""
    return [
        Diagnostic(
            "nested_object",
            Severity.ERROR,
            f"The value of property {e.key!r} should be a primitive value "
            "(nested rules need '&' in their selector)",
            e.path,
        )
        for e in entries
        if e.kind == "property" and isinstance(e.value, Mapping)
    ]


def check_value_types(entries: list[Entry]) -> list[Diagnostic]:
    """Declaration values must be strings or numbers."""
    diagnostics: list[Diagnostic] = []
    for entry in entries:
        if entry.kind not in ("property", "literal"):
            continue
        if entry.value is None or isinstance(entry.value, Mapping):
            continue
        try:
            check_declaration(entry.value, entry.path)
        except ThemeSpecError as e:
            diagnostics.append(
                Diagnostic("value_type", Severity.ERROR, str(e), entry.path)
            )
    return diagnostics


def check_stray_roots(entries: list[Entry]) -> list[Diagnostic]:
    """A bare ``$`` is only resolved once, and only in top-level selectors."""
    diagnostics: list[Diagnostic] = []
    for entry, parts in _selector_entries(entries):
        for segments in parts:
            roots = sum(1 for seg in segments if isinstance(seg, RootRef))
            if entry.kind == "nested" and roots:
                message = f"'$' in nested selector {entry.key!r} is left unexpanded"
            elif entry.kind == "rule" and roots > 1:
                message = f"Only the first '$' in {entry.key!r} is expanded"
            else:
                continue
            diagnostics.append(
                Diagnostic("stray_root", Severity.WARNING, message, entry.path)
            )
    return diagnostics


def check_empty_rules(entries: list[Entry]) -> list[Diagnostic]:
    """Rules with an empty block produce no CSS."""
    return [
        Diagnostic(
            "empty_rule",
            Severity.INFO,
            f"Rule {e.key!r} has no declarations",
            e.path,
        )
        for e in entries
        if e.kind in ("rule", "nested")
        and isinstance(e.value, Mapping)
        and not e.value
    ]


def unknown_class_rule(known: Collection[str]) -> RuleFunc:
    """Build a check flagging theme classes outside the *known* vocabulary."""

    def check_unknown_classes(entries: list[Entry]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for entry, parts in _selector_entries(entries):
            for segments in parts:
                for seg in segments:
                    if isinstance(seg, ThemeClassRef) and seg.name not in known:
                        diagnostics.append(
                            Diagnostic(
                                "unknown_class",
                                Severity.WARNING,
                                f"Unknown theme class {seg.name!r}",
                                entry.path,
                            )
                        )
        return diagnostics

    return check_unknown_classes


ALL_RULES: list[RuleFunc] = [
    check_selectors_parse,
    check_rule_blocks,
    check_empty_segments,
    check_nested_objects,
    check_value_types,
    check_stray_roots,
    check_empty_rules,
]


def validate(
    spec: RuleSpec,
    known: Collection[str] | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *spec*.

    When *known* is given, theme class placeholders outside it are reported.
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if known is not None:
        rules.append(unknown_class_rule(known))
    if extra_rules:
        rules.extend(extra_rules)
    entries = list(walk(spec))
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(entries))
    return diagnostics


def validate_or_raise(
    spec: RuleSpec,
    known: Collection[str] | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics when no errors are found.
    """
    diagnostics = validate(spec, known=known, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
