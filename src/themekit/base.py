"""The editor's default theme."""

from __future__ import annotations

from typing import Any

from themekit.builder import ThemeBuilder
from themekit.model import Theme
from themekit.names import NameSource

__all__ = ["BASE_THEME_SPEC", "base_theme"]

BASE_THEME_SPEC: dict[str, Any] = {
    "$": {
        "position": "relative !important",
        "boxSizing": "border-box",
        "&$focused": {
            "outline_fallback": "1px dotted #212121",
            "outline": "5px auto -webkit-focus-ring-color",
        },
        "display": "flex !important",
        "flexDirection": "column",
    },
    "$scroller": {
        "display": "flex !important",
        "alignItems": "flex-start !important",
        "fontFamily": "monospace",
        "lineHeight": 1.4,
        "height": "100%",
        "overflowX": "auto",
        "position": "relative",
        "zIndex": 0,
    },
    "$content": {
        "margin": 0,
        "flexGrow": 2,
        "minHeight": "100%",
        "display": "block",
        "whiteSpace": "pre",
        "boxSizing": "border-box",
        "padding": "4px 0",
        "outline": "none",
    },
    "$$light $content": {"caretColor": "black"},
    "$$dark $content": {"caretColor": "white"},
    "$line": {
        "display": "block",
        "padding": "0 2px 0 4px",
    },
    "$selectionLayer": {
        "zIndex": -1,
        "contain": "size style",
    },
    "$selectionBackground": {"position": "absolute"},
    "$$light $selectionBackground": {"background": "#d9d9d9"},
    "$$dark $selectionBackground": {"background": "#222"},
    "$$focused$light $selectionBackground": {"background": "#d7d4f0"},
    "$$focused$dark $selectionBackground": {"background": "#233"},
    "$cursorLayer": {
        "zIndex": 100,
        "contain": "size style",
        "pointerEvents": "none",
    },
    "$$focused $cursorLayer": {
        "animation": "steps(1) cm-blink 1.2s infinite",
    },
    "@keyframes cm-blink": {"0%": {}, "50%": {"visibility": "hidden"}, "100%": {}},
    "@keyframes cm-blink2": {"0%": {}, "50%": {"visibility": "hidden"}, "100%": {}},
    "$cursor": {
        "position": "absolute",
        "borderLeft": "1.2px solid black",
        "marginLeft": "-0.6px",
        "pointerEvents": "none",
        "display": "none",
    },
    "$$dark $cursor": {"borderLeftColor": "#444"},
    "$$focused $cursor": {"display": "block"},
    "$$light $activeLine": {"backgroundColor": "#f3f9ff"},
    "$$dark $activeLine": {"backgroundColor": "#223039"},
    "$$light $specialChar": {"color": "red"},
    "$$dark $specialChar": {"color": "#f78"},
    "$tab": {
        "display": "inline-block",
        "overflow": "hidden",
        "verticalAlign": "bottom",
    },
    "$placeholder": {
        "color": "#888",
        "display": "inline-block",
    },
    "$button": {
        "verticalAlign": "middle",
        "color": "inherit",
        "fontSize": "70%",
        "padding": ".2em 1em",
        "borderRadius": "3px",
    },
    "$$light $button": {
        "backgroundImage": "linear-gradient(#eff1f5, #d9d9df)",
        "border": "1px solid #888",
        "&:active": {"backgroundImage": "linear-gradient(#b4b4b4, #d0d3d6)"},
    },
    "$$dark $button": {
        "backgroundImage": "linear-gradient(#555, #111)",
        "border": "1px solid #888",
        "&:active": {"backgroundImage": "linear-gradient(#111, #333)"},
    },
    "$textfield": {
        "verticalAlign": "middle",
        "color": "inherit",
        "fontSize": "70%",
        "border": "1px solid silver",
        "padding": ".2em .5em",
    },
    "$$light $textfield": {"backgroundColor": "white"},
    "$$dark $textfield": {
        "border": "1px solid #555",
        "backgroundColor": "inherit",
    },
}


def base_theme(names: NameSource | None = None, prefix: str = "cm-") -> Theme:
    """Build the default theme under a fresh scope."""
    return ThemeBuilder(names, prefix=prefix).build(BASE_THEME_SPEC)
