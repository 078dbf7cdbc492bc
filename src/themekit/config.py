from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ThemeConfig:
    class_prefix: str = "cm-"
    scope_prefix: str = "\u037c"  # ͼ
    light_class: str = "light"
    dark_class: str = "dark"
    focused_class: str = "focused"

    def with_overrides(self, **overrides: object) -> ThemeConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_CONFIG = ThemeConfig()
