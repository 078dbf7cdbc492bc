"""Theme builder: resolves a rule specification into scoped rules."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from themekit.errors import ThemeSpecError
from themekit.model import Rule, RuleSpec, Theme
from themekit.names import NameSource, default_names
from themekit.selector import SelectorRewriter

__all__ = ["ThemeBuilder", "build_theme", "split_selector_list"]

log = logging.getLogger("themekit")

# At-rules whose bodies are copied verbatim instead of holding selectors.
_LITERAL_AT_RULES = ("@keyframes", "@font-face", "@page", "@counter-style")

_LIST_SEP_RE = re.compile(r",\s*")


def split_selector_list(selector: str) -> list[str]:
    """Split a comma-separated selector list into its parts."""
    return _LIST_SEP_RE.split(selector)


def check_declaration(value: object, path: tuple[str, ...]) -> None:
    """Raise :class:`ThemeSpecError` unless *value* is a CSS value."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ThemeSpecError(
            f"Declaration value must be a string or number, got {type(value).__name__}",
            path,
        )


def is_literal_at_rule(key: str) -> bool:
    name = key.split(None, 1)[0]
    return name in _LITERAL_AT_RULES or name.startswith("@-")


class _RuleWalker:
    """Depth-first walk over a rule specification."""

    def __init__(self, rewriter: SelectorRewriter) -> None:
        self.rewriter = rewriter

    def top_level(self, spec: RuleSpec, path: tuple[str, ...] = ()) -> list[Rule]:
        rules: list[Rule] = []
        for key, value in spec.items():
            key_path = path + (key,)
            if key.startswith("@"):
                rules.append(self.at_rule(key, value, key_path))
                continue
            if not isinstance(value, Mapping):
                raise ThemeSpecError(
                    f"Rule {key!r} must map to a declaration block", key_path
                )
            selectors = [
                self.rewriter.build_main_selector(part)
                for part in split_selector_list(key)
            ]
            rules.extend(self.rule(selectors, value, key_path))
        return rules

    def rule(
        self, selectors: list[str], block: Mapping[str, Any], path: tuple[str, ...]
    ) -> list[Rule]:
        declarations: dict[str, Any] = {}
        nested: list[Rule] = []
        for prop, value in block.items():
            prop_path = path + (prop,)
            if "&" in prop:
                if not isinstance(value, Mapping):
                    raise ThemeSpecError(
                        f"Nested rule {prop!r} must map to a declaration block",
                        prop_path,
                    )
                extended = [
                    self.rewriter.extend_selector(part, outer)
                    for part in split_selector_list(prop)
                    for outer in selectors
                ]
                nested.extend(self.rule(extended, value, prop_path))
            elif isinstance(value, Mapping):
                raise ThemeSpecError(
                    f"The value of property {prop!r} should be a primitive value",
                    prop_path,
                )
            elif value is not None:
                check_declaration(value, prop_path)
                declarations[prop] = value

        # Nested rules come first, followed by the rule they extend.
        rules: list[Rule] = list(nested)
        if declarations:
            rules.append(Rule(", ".join(selectors), declarations))
        return rules

    def at_rule(self, key: str, value: Any, path: tuple[str, ...]) -> Rule:
        if value is None:
            return Rule(key, statement=True)
        if not isinstance(value, Mapping):
            raise ThemeSpecError(f"At-rule {key!r} must map to a block", path)
        if is_literal_at_rule(key):
            return self.literal_block(key, value, path)
        # Conditional group rules (@media, @supports) hold ordinary rules.
        return Rule(key, children=tuple(self.top_level(value, path)))

    def literal_block(
        self, key: str, block: Mapping[str, Any], path: tuple[str, ...]
    ) -> Rule:
        declarations: dict[str, Any] = {}
        children: list[Rule] = []
        for prop, value in block.items():
            prop_path = path + (prop,)
            if isinstance(value, Mapping):
                children.append(self.literal_block(prop, value, prop_path))
            elif value is not None:
                check_declaration(value, prop_path)
                declarations[prop] = value
        return Rule(key, declarations, tuple(children))


def build_theme(
    main_selector: str,
    spec: RuleSpec,
    scope: str | None = None,
    prefix: str = "cm-",
) -> Theme:
    """Resolve *spec* with every rule scoped under *main_selector*.

    *scope* defaults to the main selector without its leading dot.
    """
    if scope is None:
        scope = main_selector[1:] if main_selector.startswith(".") else main_selector
    walker = _RuleWalker(SelectorRewriter(main_selector, prefix))
    rules = walker.top_level(spec)
    log.debug("Built theme %s: %d rule(s)", scope, len(rules))
    return Theme(scope=scope, main_selector=main_selector, rules=tuple(rules))


class ThemeBuilder:
    """Builds themes under fresh scope tokens from an injected name source."""

    def __init__(self, names: NameSource | None = None, prefix: str = "cm-") -> None:
        self.names = names if names is not None else default_names()
        self.prefix = prefix

    def build(self, spec: RuleSpec, scope: str | None = None) -> Theme:
        """Build *spec* under *scope*, generating a unique scope if omitted."""
        if scope is None:
            scope = self.names.new_name()
        return build_theme("." + scope, spec, scope=scope, prefix=self.prefix)
