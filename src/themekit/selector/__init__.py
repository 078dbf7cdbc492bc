from themekit.selector.model import Literal, ParentRef, RootRef, Segment, ThemeClassRef
from themekit.selector.parser import tokenize
from themekit.selector.rewriter import SelectorRewriter, expand_theme_classes

__all__ = [
    "Literal",
    "ParentRef",
    "RootRef",
    "Segment",
    "SelectorRewriter",
    "ThemeClassRef",
    "expand_theme_classes",
    "tokenize",
]
