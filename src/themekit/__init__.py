"""Theme classes and scoped stylesheet rules for an editor widget."""

from themekit.base import BASE_THEME_SPEC, base_theme
from themekit.builder import ThemeBuilder, build_theme
from themekit.composition import DARK_THEME, THEME, Facet, ThemeStack
from themekit.config import DEFAULT_CONFIG, ThemeConfig
from themekit.errors import SelectorError, ThemeClassError, ThemeError, ThemeSpecError
from themekit.model import Rule, Theme
from themekit.names import (
    CounterNames,
    NameSource,
    RandomNames,
    expand_theme_class,
    theme_class,
)
from themekit.selector import SelectorRewriter, expand_theme_classes
from themekit.stylemodule import StyleModule
from themekit.validation import (
    Diagnostic,
    Severity,
    ValidationError,
    validate,
    validate_or_raise,
)

__version__ = "0.1.0"

__all__ = [
    "BASE_THEME_SPEC",
    "CounterNames",
    "DARK_THEME",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "Facet",
    "NameSource",
    "RandomNames",
    "Rule",
    "SelectorError",
    "SelectorRewriter",
    "Severity",
    "StyleModule",
    "THEME",
    "Theme",
    "ThemeBuilder",
    "ThemeClassError",
    "ThemeConfig",
    "ThemeError",
    "ThemeSpecError",
    "ThemeStack",
    "ValidationError",
    "base_theme",
    "build_theme",
    "expand_theme_class",
    "expand_theme_classes",
    "theme_class",
    "validate",
    "validate_or_raise",
]
