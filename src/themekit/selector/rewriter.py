"""Placeholder substitution for theme rule selectors.

Selectors in a rule specification may contain:

- ``$name`` / ``$name.sub``: a theme class, expanded to a compound class
  selector that requires every ancestor class (``.cm-name.cm-name-sub``);
- a bare ``$``: the scoped root of the theme;
- ``&``: the selector of the enclosing rule (nested rules only).
"""

from __future__ import annotations

from themekit.errors import SelectorError, ThemeClassError
from themekit.names import expand_theme_class
from themekit.selector.model import Literal, ParentRef, RootRef, Segment, ThemeClassRef
from themekit.selector.parser import tokenize

__all__ = ["SelectorRewriter", "expand_theme_classes"]


def _expand_segments(
    selector: str, segments: list[Segment], prefix: str
) -> list[Segment]:
    """Replace theme class references with literal class selectors."""
    out: list[Segment] = []
    for seg in segments:
        if isinstance(seg, ThemeClassRef):
            try:
                classes = expand_theme_class(seg.name, prefix)
            except ThemeClassError as e:
                raise SelectorError(
                    f"Invalid theme class {seg.source!r} in selector {selector!r}",
                    selector=selector,
                ) from e
            out.append(Literal("".join("." + c for c in classes)))
        else:
            out.append(seg)
    return out


def _render(segments: list[Segment]) -> str:
    return "".join(seg.source for seg in segments)


def expand_theme_classes(selector: str, prefix: str = "cm-") -> str:
    """Expand every theme class placeholder in *selector*.

    Bare ``$`` and ``&`` are left in place.
    """
    return _render(_expand_segments(selector, tokenize(selector), prefix))


class SelectorRewriter:
    """Resolves placeholder selectors against one theme's main selector."""

    def __init__(self, main_selector: str, prefix: str = "cm-") -> None:
        self.main_selector = main_selector
        self.prefix = prefix
        self._scoped_prefix = main_selector + " "

    def expand_placeholders(self, selector: str) -> str:
        return expand_theme_classes(selector, self.prefix)

    def build_main_selector(self, selector: str) -> str:
        """Scope a top-level rule selector under the main selector.

        The first bare ``$`` becomes the main selector; without one, the
        selector is made a descendant of the main selector.
        """
        segments = _expand_segments(selector, tokenize(selector), self.prefix)
        for i, seg in enumerate(segments):
            if isinstance(seg, RootRef):
                segments[i] = Literal(self.main_selector)
                return _render(segments)
        return self._scoped_prefix + _render(segments)

    def extend_selector(self, template: str, outer: str) -> str:
        """Resolve a nested ``&`` template against the enclosing selector.

        When *outer* is already a descendant of the main selector, the scope
        prefix is hoisted so it is not repeated inside the result.
        """
        segments = _expand_segments(template, tokenize(template), self.prefix)
        if outer.startswith(self._scoped_prefix):
            parent = outer[len(self._scoped_prefix):]
            return self._scoped_prefix + self._substitute_parent(segments, parent)
        return self._substitute_parent(segments, outer)

    @staticmethod
    def _substitute_parent(segments: list[Segment], parent: str) -> str:
        return "".join(
            parent if isinstance(seg, ParentRef) else seg.source for seg in segments
        )
