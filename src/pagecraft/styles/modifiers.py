"""
Modifiers scope a class token to a state, color scheme or breakpoint.

A modifier list collapses into one combined prefix (``md:dark:hover:``) that
is prepended to every class token. The prefix is computed from the modifier
*set*: kinds are ordered breakpoint, color scheme, state, custom, insertion
order is kept within a kind and duplicates collapse, so the same intent
always yields the byte-identical token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

SEPARATOR = ":"


class ModifierKind(str, Enum):
    BREAKPOINT = "breakpoint"
    COLOR_SCHEME = "color-scheme"
    STATE = "state"
    CUSTOM = "custom"


_KIND_ORDER = {
    ModifierKind.BREAKPOINT: 0,
    ModifierKind.COLOR_SCHEME: 1,
    ModifierKind.STATE: 2,
    ModifierKind.CUSTOM: 3,
}


@dataclass(frozen=True)
class Modifier:
    """
    A tagged scoping qualifier.

    Attributes:
        kind: Which family the modifier belongs to.
        name: The token used in the class prefix (``hover``, ``md``, ``2xl``).
    """
    kind: ModifierKind
    name: str

    @property
    def token(self) -> str:
        return self.name

    @property
    def prefix(self) -> str:
        return f"{self.name}{SEPARATOR}"

    @classmethod
    def state(cls, name: str) -> "Modifier":
        return cls(ModifierKind.STATE, name)

    @classmethod
    def breakpoint(cls, name: str) -> "Modifier":
        return cls(ModifierKind.BREAKPOINT, name)

    @classmethod
    def custom(cls, prefix: str) -> "Modifier":
        """Raw prefix such as ``group-hover`` or ``group-hover:``."""
        return cls(ModifierKind.CUSTOM, prefix.strip().rstrip(SEPARATOR))

    def __str__(self) -> str:
        return self.prefix


XS = Modifier.breakpoint("xs")
SM = Modifier.breakpoint("sm")
MD = Modifier.breakpoint("md")
LG = Modifier.breakpoint("lg")
XL = Modifier.breakpoint("xl")
XL2 = Modifier.breakpoint("2xl")

DARK = Modifier(ModifierKind.COLOR_SCHEME, "dark")

HOVER = Modifier.state("hover")
FOCUS = Modifier.state("focus")
ACTIVE = Modifier.state("active")
PLACEHOLDER = Modifier.state("placeholder")
FIRST = Modifier.state("first")
LAST = Modifier.state("last")
DISABLED = Modifier.state("disabled")
MOTION_REDUCE = Modifier.state("motion-reduce")
ARIA_BUSY = Modifier.state("aria-busy")
ARIA_CHECKED = Modifier.state("aria-checked")
ARIA_DISABLED = Modifier.state("aria-disabled")
ARIA_EXPANDED = Modifier.state("aria-expanded")
ARIA_HIDDEN = Modifier.state("aria-hidden")
ARIA_PRESSED = Modifier.state("aria-pressed")
ARIA_READONLY = Modifier.state("aria-readonly")
ARIA_REQUIRED = Modifier.state("aria-required")
ARIA_SELECTED = Modifier.state("aria-selected")

BREAKPOINTS = (XS, SM, MD, LG, XL, XL2)

_BY_NAME = {
    modifier.name: modifier
    for modifier in (
        *BREAKPOINTS,
        DARK,
        HOVER,
        FOCUS,
        ACTIVE,
        PLACEHOLDER,
        FIRST,
        LAST,
        DISABLED,
        MOTION_REDUCE,
        ARIA_BUSY,
        ARIA_CHECKED,
        ARIA_DISABLED,
        ARIA_EXPANDED,
        ARIA_HIDDEN,
        ARIA_PRESSED,
        ARIA_READONLY,
        ARIA_REQUIRED,
        ARIA_SELECTED,
    )
}

ModifierLike = Union[Modifier, str]
Modifiers = Union[ModifierLike, Iterable[ModifierLike], None]


def as_modifier(value: ModifierLike) -> Modifier:
    """Resolve a known modifier name; unknown strings become custom prefixes."""
    if isinstance(value, Modifier):
        return value
    name = value.strip().rstrip(SEPARATOR)
    return _BY_NAME.get(name) or Modifier.custom(name)


def normalize_modifiers(modifiers: Modifiers) -> Tuple[Modifier, ...]:
    """
    Canonical, duplicate-free ordering of a modifier collection.
    """
    if modifiers is None:
        return ()
    if isinstance(modifiers, (Modifier, str)):
        modifiers = (modifiers,)
    seen: List[Modifier] = []
    for item in modifiers:
        modifier = as_modifier(item)
        if modifier.name and modifier not in seen:
            seen.append(modifier)
    return tuple(sorted(seen, key=lambda m: _KIND_ORDER[m.kind]))


def combine_prefix(modifiers: Modifiers) -> str:
    return "".join(modifier.prefix for modifier in normalize_modifiers(modifiers))


def combine_classes(classes: Iterable[str], modifiers: Modifiers) -> List[str]:
    """
    Prefix every base class with the combined modifier prefix.
    """
    prefix = combine_prefix(modifiers)
    return [f"{prefix}{name}" for name in classes if name]


def merge_classes(existing: Sequence[str], new: Iterable[str]) -> Tuple[str, ...]:
    """
    Append new tokens to existing ones, dropping exact-string duplicates.
    """
    merged = list(existing)
    for name in new:
        if name and name not in merged:
            merged.append(name)
    return tuple(merged)
