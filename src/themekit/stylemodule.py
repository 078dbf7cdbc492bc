"""CSS serialization for built themes."""

from __future__ import annotations

import re

from themekit.builder import check_declaration
from themekit.model import Declaration, Rule, Theme

__all__ = ["StyleModule", "css_property", "css_value", "render_rule"]

_UPPER_RE = re.compile(r"[A-Z]")


def css_property(name: str) -> str:
    """Convert a specification property name to its CSS spelling.

    Anything after an underscore is dropped so the same property can be
    declared twice (``outline_fallback`` renders as ``outline``).
    """
    name = name.split("_", 1)[0]
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), name)


def css_value(value: Declaration) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_rule(rule: Rule) -> str:
    """Render one rule, including the nested rules of an at-rule block."""
    if rule.statement:
        return rule.selector + ";"
    parts: list[str] = []
    for prop, value in rule.declarations.items():
        check_declaration(value, (rule.selector, prop))
        parts.append(f"{css_property(prop)}: {css_value(value)};")
    parts.extend(render_rule(child) for child in rule.children)
    return f"{rule.selector} {{{' '.join(parts)}}}"


class StyleModule:
    """The CSS text of one theme, ready to be mounted in a document.

    Mount modules in order: rules from later modules override earlier ones
    at equal specificity.
    """

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.rules = [render_rule(rule) for rule in theme.rules]

    @property
    def name(self) -> str:
        return self.theme.scope

    def get_rules(self) -> str:
        return "\n".join(self.rules)

    def __repr__(self) -> str:
        return f"StyleModule(name={self.name!r}, rules={len(self.rules)})"
