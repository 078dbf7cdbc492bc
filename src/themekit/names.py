"""Theme class names and scope tokens.

A theme class is a dot-separated hierarchical name such as ``panel.search``.
Elements tagged with it receive one DOM class per prefix of the name, so that
rules written against ``panel`` also apply while rules for ``panel.search``
(registered later, or more specific) take precedence.

Scope tokens are opaque unique names identifying one built theme.  They come
from an injected :class:`NameSource` so that two builds never collide.
"""

from __future__ import annotations

import itertools
import threading
import uuid
from typing import Protocol

from themekit.errors import ThemeClassError

__all__ = [
    "CounterNames",
    "NameSource",
    "RandomNames",
    "default_names",
    "expand_theme_class",
    "split_theme_class",
    "theme_class",
]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def split_theme_class(name: str) -> list[str]:
    """Split *name* into its segments, rejecting empty ones."""
    if not name:
        raise ThemeClassError(name, "Theme class name must be a non-empty string")
    segments = name.split(".")
    if any(not s for s in segments):
        raise ThemeClassError(
            name, f"Theme class name {name!r} contains an empty segment"
        )
    return segments


def expand_theme_class(name: str, prefix: str = "cm-") -> list[str]:
    """Return the DOM class names for *name*, least specific first.

    >>> expand_theme_class("panel.search")
    ['cm-panel', 'cm-panel-search']
    """
    if "." not in name:
        split_theme_class(name)
        return [prefix + name]
    segments = split_theme_class(name)
    return [prefix + "-".join(segments[:i]) for i in range(1, len(segments) + 1)]


def theme_class(name: str, prefix: str = "cm-") -> str:
    """Return the space-separated ``class`` attribute value for *name*."""
    return " ".join(expand_theme_class(name, prefix))


# ---------------------------------------------------------------------------
# Scope token sources
# ---------------------------------------------------------------------------


class NameSource(Protocol):
    """Produces globally unique names for theme scopes."""

    def new_name(self) -> str: ...


def _base36(value: int) -> str:
    digits = []
    while True:
        value, rem = divmod(value, 36)
        digits.append(_DIGITS[rem])
        if not value:
            break
    return "".join(reversed(digits))


class CounterNames:
    """Sequential names: the prefix followed by a base-36 counter.

    Safe to share between threads.
    """

    def __init__(self, prefix: str = "\u037c", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_name(self) -> str:
        with self._lock:
            value = next(self._counter)
        return self.prefix + _base36(value)


class RandomNames:
    """Random names built from a uuid4, for themes built in separate processes."""

    def __init__(self, prefix: str = "cm-", length: int = 12) -> None:
        self.prefix = prefix
        self.length = length

    def new_name(self) -> str:
        return self.prefix + uuid.uuid4().hex[: self.length]


def default_names() -> RandomNames:
    """Return a fresh name source for builders created without one.

    Its names never share a prefix with a default :class:`CounterNames`.
    """
    return RandomNames()
