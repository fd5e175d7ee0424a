"""
Palette colors as they appear inside utility class tokens.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

PALETTE = (
    "slate",
    "gray",
    "zinc",
    "neutral",
    "stone",
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
)
SHADELESS = ("white", "black", "transparent", "current", "inherit")
SHADES = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
_THEME_NAME = re.compile(r"^[a-z][a-z0-9-]*$")


def nearest_shade(shade: int) -> int:
    """Snap an arbitrary number to the closest palette shade (lower shade wins ties)."""
    return min(SHADES, key=lambda candidate: (abs(candidate - shade), candidate))


@dataclass(frozen=True)
class Color:
    """
    A palette color with optional shade and opacity.

    ``Color("blue", 500)`` renders as ``blue-500``, ``Color("white", opacity=0.5)``
    as ``white/50`` and ``Color.custom("#0af")`` as ``[#0af]``. Opacity outside
    0..1 is ignored.
    """
    name: str
    shade: Optional[int] = None
    opacity: Optional[float] = None
    arbitrary: bool = False

    @classmethod
    def custom(cls, value: str, opacity: Optional[float] = None) -> "Color":
        return cls(value, opacity=opacity, arbitrary=True)

    @property
    def _opacity_suffix(self) -> str:
        if self.opacity is None or not 0 <= self.opacity <= 1:
            return ""
        return f"/{int(round(self.opacity * 100))}"

    @property
    def value(self) -> str:
        if self.arbitrary:
            return f"[{self.name}]{self._opacity_suffix}"
        if self.name in SHADELESS or self.shade is None:
            return f"{self.name}{self._opacity_suffix}"
        return f"{self.name}-{nearest_shade(self.shade)}{self._opacity_suffix}"

    def __str__(self) -> str:
        return self.value


ColorLike = Union[Color, str]


def color_token(color: Optional[ColorLike]) -> Optional[str]:
    """
    Class fragment for a color; strings are parsed first so ``"#0af"`` and
    ``Color.custom("#0af")`` give the same token.
    """
    parsed = parse_color(color)
    return parsed.value if parsed is not None else None


def parse_color(value: Optional[ColorLike]) -> Optional[Color]:
    """
    Parse ``"blue-500"``, ``"blue-500/50"``, ``"white"`` or ``"[#0af]"`` into a Color.

    Other lowercase names (``"brand"``, ``"brand-500"``) are kept as theme
    color names; anything else becomes an arbitrary value.
    """
    if value is None or isinstance(value, Color):
        return value
    text = str(value).strip()
    if not text:
        return None
    opacity: Optional[float] = None
    if "/" in text and not text.endswith("]"):
        text, _, raw_opacity = text.rpartition("/")
        if raw_opacity.isdigit():
            opacity = int(raw_opacity) / 100
    if text.startswith("[") and text.endswith("]"):
        return Color.custom(text[1:-1], opacity=opacity)
    name, _, shade = text.partition("-")
    if name in SHADELESS and not shade:
        return Color(name, opacity=opacity)
    if name in PALETTE and shade.isdigit():
        return Color(name, int(shade), opacity=opacity)
    if _THEME_NAME.match(text):
        return Color(text, opacity=opacity)
    return Color.custom(text, opacity=opacity)
