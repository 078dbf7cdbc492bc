"""Combining a base theme with user-supplied themes.

Each source contributes a value to a :class:`Facet`, which reduces the
ordered contributions to one effective value.  :class:`ThemeStack` uses the
``THEME`` and ``DARK_THEME`` facets to compute the classes for the editor
root and the order in which theme stylesheets are mounted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from themekit.config import DEFAULT_CONFIG, ThemeConfig
from themekit.model import Theme
from themekit.names import theme_class
from themekit.stylemodule import StyleModule

__all__ = ["DARK_THEME", "THEME", "Facet", "ThemeStack"]

log = logging.getLogger("themekit")

I = TypeVar("I")
O = TypeVar("O")


@dataclass(frozen=True)
class Facet(Generic[I, O]):
    """A named reducer over per-source contributions."""

    combine: Callable[[Sequence[I]], O]
    name: str = ""

    def compute(self, values: Iterable[I]) -> O:
        return self.combine(list(values))


THEME: Facet[str, str] = Facet(combine=lambda values: " ".join(values), name="theme")

DARK_THEME: Facet[bool, bool] = Facet(
    combine=lambda values: True in values, name="dark_theme"
)


@dataclass(frozen=True)
class ThemeStack:
    """A base theme followed by user themes, lowest precedence first."""

    base: Theme
    themes: tuple[Theme, ...] = ()
    dark: tuple[bool, ...] = ()
    config: ThemeConfig = field(default=DEFAULT_CONFIG)

    def with_theme(self, theme: Theme, dark: bool = False) -> ThemeStack:
        """Return a new stack with *theme* added on top."""
        log.debug("Stacking theme %s (dark=%s)", theme.scope, dark)
        return replace(self, themes=self.themes + (theme,), dark=self.dark + (dark,))

    @property
    def is_dark(self) -> bool:
        return DARK_THEME.compute(self.dark)

    def root_classes(self, focused: bool = False) -> str:
        """Return the ``class`` attribute value for the editor root."""
        prefix = self.config.class_prefix
        classes = [self.base.scope]
        user = THEME.compute(t.scope for t in self.themes)
        if user:
            classes.append(user)
        mode = self.config.dark_class if self.is_dark else self.config.light_class
        classes.append(theme_class(mode, prefix))
        if focused:
            classes.append(theme_class(self.config.focused_class, prefix))
        return " ".join(classes)

    def modules(self) -> list[StyleModule]:
        """Style modules in mount order: the base first, then user themes."""
        return [StyleModule(t) for t in (self.base,) + self.themes]

    def stylesheet(self) -> str:
        return "\n".join(m.get_rules() for m in self.modules())
