"""Selector segments produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ThemeClassRef:
    """A ``$name.sub`` placeholder referring to a theme class."""

    name: str

    @property
    def source(self) -> str:
        return "$" + self.name


@dataclass(frozen=True)
class RootRef:
    """A bare ``$``: the scoped root selector of the theme."""

    @property
    def source(self) -> str:
        return "$"


@dataclass(frozen=True)
class ParentRef:
    """An ``&``: the selector of the enclosing rule."""

    @property
    def source(self) -> str:
        return "&"


@dataclass(frozen=True)
class Literal:
    """Selector text copied to the output unchanged."""

    text: str

    @property
    def source(self) -> str:
        return self.text


Segment = Union[ThemeClassRef, RootRef, ParentRef, Literal]
