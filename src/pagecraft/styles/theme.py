"""
Theme-level tables that class tokens are resolved against.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .modifiers import ModifierKind, ModifierLike, as_modifier

DEFAULT_BREAKPOINTS: Dict[str, str] = {
    "xs": "30rem",
    "sm": "40rem",
    "md": "48rem",
    "lg": "64rem",
    "xl": "80rem",
    "2xl": "96rem",
}


def _css_name(key: str) -> str:
    return "".join(ch if ch.isalnum() or ch == "-" else "-" for ch in key.strip().lower())


@dataclass(frozen=True)
class Theme:
    """
    Breakpoint thresholds plus any extra design tokens.

    Breakpoint modifiers only carry a name (``md``); the threshold lives here,
    so overriding a value changes every ``md:`` class without touching style calls.

    Attributes:
        breakpoints: Overrides or additions to the default min-width table.
        tokens: Extra ``@theme`` variables, e.g. ``{"color-brand": "#0af"}``.
    """
    breakpoints: Mapping[str, str] = field(default_factory=dict)
    tokens: Mapping[str, str] = field(default_factory=dict)

    @property
    def breakpoint_table(self) -> Dict[str, str]:
        table = dict(DEFAULT_BREAKPOINTS)
        table.update(self.breakpoints)
        return table

    def min_width(self, breakpoint: ModifierLike) -> Optional[str]:
        """Threshold for a breakpoint modifier or name, None when unknown."""
        modifier = as_modifier(breakpoint)
        return self.breakpoint_table.get(modifier.name)

    def media_query(self, breakpoint: ModifierLike) -> Optional[str]:
        modifier = as_modifier(breakpoint)
        if modifier.kind is ModifierKind.COLOR_SCHEME:
            return f"(prefers-color-scheme: {modifier.name})"
        width = self.min_width(modifier)
        if width is None:
            return None
        return f"(min-width: {width})"

    def css(self) -> str:
        """
        ``@theme`` block for the overridden values only; empty when nothing is overridden.
        """
        lines = [f"  --breakpoint-{_css_name(name)}: {value};" for name, value in self.breakpoints.items()]
        lines.extend(f"  --{_css_name(name)}: {value};" for name, value in self.tokens.items())
        if not lines:
            return ""
        return "@theme {\n" + "\n".join(lines) + "\n}"
