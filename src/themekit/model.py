"""Built theme model: Rule and Theme dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

Declaration = Union[str, int, float]
RuleSpec = Mapping[str, Any]


@dataclass(frozen=True)
class Rule:
    """A resolved style rule.

    Plain rules carry declarations only.  At-rule blocks (``@media``,
    ``@keyframes``) carry their nested rules in ``children``; bodiless
    at-rules such as ``@import`` are marked with ``statement``.
    """

    selector: str
    declarations: Mapping[str, Declaration] = field(default_factory=dict)
    children: tuple[Rule, ...] = ()
    statement: bool = False

    @property
    def is_at_rule(self) -> bool:
        return self.selector.startswith("@")

    def body(self) -> dict[str, Any] | None:
        """Return the declaration block in rule-specification form."""
        if self.statement:
            return None
        out: dict[str, Any] = dict(self.declarations)
        for child in self.children:
            merged = out.setdefault(child.selector, {})
            merged.update(child.body() or {})
        return out


@dataclass(frozen=True)
class Theme:
    """A rule specification resolved under one scope.

    Attributes:
        scope: Unique token; attach it as a class on the editor root.
        main_selector: The selector every rule is scoped under.
        rules: Resolved rules in specification order, duplicates included.
    """

    scope: str
    main_selector: str
    rules: tuple[Rule, ...] = ()

    def mapping(self) -> dict[str, Any]:
        """Flatten the rules into a selector -> declaration-block mapping.

        Rules sharing a selector are merged; later declarations win.
        """
        out: dict[str, Any] = {}
        for rule in self.rules:
            body = rule.body()
            if body is None:
                out[rule.selector] = None
                continue
            current = out.get(rule.selector)
            if current is None:
                out[rule.selector] = body
            else:
                current.update(body)
        return out

    def selectors(self) -> list[str]:
        return [rule.selector for rule in self.rules]
