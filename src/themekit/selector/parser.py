"""Lark-based tokenizer for placeholder selectors."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from themekit.errors import SelectorError
from themekit.selector.model import Literal, ParentRef, RootRef, Segment, ThemeClassRef

__all__ = ["tokenize"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_parser: Lark | None = None


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the flat parse tree into a list of :data:`Segment` objects."""

    def start(self, items: list[Token]) -> list[Segment]:
        segments: list[Segment] = []
        for tok in items:
            if tok.type == "THEME_CLASS":
                segments.append(ThemeClassRef(str(tok)[1:]))
            elif tok.type == "ROOT":
                segments.append(RootRef())
            elif tok.type == "PARENT":
                segments.append(ParentRef())
            else:
                segments.append(Literal(str(tok)))
        return segments


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")
    return _parser


def tokenize(selector: str) -> list[Segment]:
    """Split *selector* into theme-class, root, parent and literal segments.

    >>> tokenize("$$focused &:hover")
    [RootRef(), ThemeClassRef(name='focused'), Literal(text=' '), ParentRef(), Literal(text=':hover')]
    """
    if not selector:
        return []
    try:
        tree = _get_parser().parse(selector)
    except LarkError as e:
        column = getattr(e, "column", None)
        raise SelectorError(
            f"Cannot tokenize selector {selector!r}: {e}",
            selector=selector,
            column=column,
        ) from e
    return SelectorTransformer().transform(tree)
