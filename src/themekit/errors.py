"""Exception types raised while expanding and building themes."""

from __future__ import annotations


class ThemeError(Exception):
    """Base class for every error raised by themekit."""


class ThemeClassError(ThemeError, ValueError):
    """Raised when a theme class name has empty or missing segments."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f"Invalid theme class name: {name!r}")


class SelectorError(ThemeError):
    """Raised when a rule selector cannot be tokenized or expanded."""

    def __init__(
        self, message: str, selector: str = "", column: int | None = None
    ) -> None:
        self.selector = selector
        self.column = column
        super().__init__(message)


class ThemeSpecError(ThemeError):
    """Raised when a rule specification is structurally invalid.

    ``path`` lists the keys leading from the top of the specification to the
    offending entry.
    """

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        self.path = path
        if path:
            message = f"{message} (at {' > '.join(path)})"
        super().__init__(message)
