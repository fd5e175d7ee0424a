"""
Enumerations shared by the style families.

Each member's value is the fragment that lands in the class token, so
``Edge.TOP.value`` is ``"t"`` and ``Edge.ALL.value`` is empty.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class Edge(str, Enum):
    ALL = ""
    TOP = "t"
    LEADING = "l"
    TRAILING = "r"
    BOTTOM = "b"
    HORIZONTAL = "x"
    VERTICAL = "y"


class BorderStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    DOUBLE = "double"
    HIDDEN = "hidden"
    NONE = "none"
    DIVIDE = "divide"


class RadiusSide(str, Enum):
    ALL = ""
    TOP = "t"
    RIGHT = "r"
    BOTTOM = "b"
    LEFT = "l"
    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_LEFT = "bl"
    BOTTOM_RIGHT = "br"


class RadiusSize(str, Enum):
    NONE = "none"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    FULL = "full"


class ShadowSize(str, Enum):
    NONE = "none"
    XS2 = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"


class TextSize(str, Enum):
    XS = "xs"
    SM = "sm"
    BASE = "base"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"
    XL5 = "5xl"
    XL6 = "6xl"
    XL7 = "7xl"
    XL8 = "8xl"
    XL9 = "9xl"

    @property
    def class_name(self) -> str:
        return f"text-{self.value}"


class Weight(str, Enum):
    THIN = "thin"
    EXTRALIGHT = "extralight"
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRABOLD = "extrabold"
    BLACK = "black"

    @property
    def class_name(self) -> str:
        return f"font-{self.value}"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def class_name(self) -> str:
        return f"text-{self.value}"


class Tracking(str, Enum):
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    WIDE = "wide"
    WIDER = "wider"
    WIDEST = "widest"

    @property
    def class_name(self) -> str:
        return f"tracking-{self.value}"


class Leading(str, Enum):
    TIGHTEST = "tightest"
    TIGHTER = "tighter"
    TIGHT = "tight"
    NORMAL = "normal"
    RELAXED = "relaxed"
    LOOSE = "loose"

    @property
    def class_name(self) -> str:
        return f"leading-{self.value}"


class Decoration(str, Enum):
    UNDERLINE = "underline"
    OVERLINE = "overline"
    LINE_THROUGH = "line-through"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"
    WAVY = "wavy"
    NONE = "no-underline"

    @property
    def class_name(self) -> str:
        return self.value


class Wrapping(str, Enum):
    BALANCE = "balance"
    PRETTY = "pretty"
    WRAP = "wrap"
    NOWRAP = "nowrap"

    @property
    def class_name(self) -> str:
        return f"text-{self.value}"


def coerce_enum(enum_type: Type[E], value: object, default: Optional[E] = None) -> Optional[E]:
    """
    Resolve ``value`` to a member of ``enum_type`` by value or member name.

    Unknown values fall back to ``default`` instead of raising.
    """
    if value is None:
        return default
    if isinstance(value, enum_type):
        return value
    by_value = {member.value: member for member in enum_type}
    if isinstance(value, (str, int)) and value in by_value:
        return by_value[value]
    if isinstance(value, str):
        member = enum_type.__members__.get(value.strip().upper().replace("-", "_"))
        if member is not None:
            return member
    return default


_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


def coerce_int(value: object, default: Optional[int] = None) -> Optional[int]:
    """Integer form of ``value``; ``default`` for None or anything non-numeric."""
    if value is None or isinstance(value, bool):
        return default
    if not isinstance(value, (int, float, str)):
        return default
    try:
        return int(float(value.strip())) if isinstance(value, str) else int(value)
    except (ValueError, OverflowError):
        return default


def coerce_bool(value: object, default: bool = False) -> bool:
    """
    Boolean form of ``value``.

    Strings such as ``"false"`` or ``"off"`` read as False; anything
    unrecognised falls back to ``default``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default
