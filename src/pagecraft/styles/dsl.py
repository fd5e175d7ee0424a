"""
Declarative style functions.

Each function returns a :class:`~pagecraft.styles.operation.Modification`
instead of touching a node; scope functions nest them::

    node.on(
        font(size=TextSize.SM),
        md(font(size=TextSize.LG), hover(background(Color("blue", 600)))),
    )
"""

from __future__ import annotations

from typing import Any, Iterable, Tuple, Union

from .modifiers import (
    ACTIVE,
    DARK,
    DISABLED,
    FIRST,
    FOCUS,
    HOVER,
    LAST,
    LG,
    MD,
    MOTION_REDUCE,
    PLACEHOLDER,
    SM,
    XL,
    XL2,
    XS,
    ModifierLike,
    Modifiers,
    normalize_modifiers,
)
from .operation import CompositeModification, Modification, ScopedModification, StyleOperation
from .stylable import Stylable

ModificationLike = Union[Modification, Iterable[Modification]]


class _Declarative(Stylable):
    def _apply_style(self, operation: StyleOperation, params: Any, on: Modifiers) -> Modification:
        return operation.as_modification(params, on)


_declarative = _Declarative()

style = _declarative.style
background = _declarative.background
margins = _declarative.margins
padding = _declarative.padding
hidden = _declarative.hidden
border = _declarative.border
rounded = _declarative.rounded
shadow = _declarative.shadow
font = _declarative.font
opacity = _declarative.opacity


def _flatten(modifications: Iterable[ModificationLike]) -> Tuple[Modification, ...]:
    flat = []
    for item in modifications:
        if isinstance(item, Modification):
            flat.append(item)
        else:
            flat.extend(_flatten(item))
    return tuple(flat)


def group(*modifications: ModificationLike) -> CompositeModification:
    return CompositeModification(_flatten(modifications))


def scope(*modifiers: ModifierLike):
    """Build a scope function for arbitrary modifiers, e.g. ``scope("group-hover")``."""
    resolved = normalize_modifiers(modifiers)

    def apply(*modifications: ModificationLike) -> ScopedModification:
        return ScopedModification(resolved, _flatten(modifications))

    return apply


xs = scope(XS)
sm = scope(SM)
md = scope(MD)
lg = scope(LG)
xl = scope(XL)
xl2 = scope(XL2)
dark = scope(DARK)
hover = scope(HOVER)
focus = scope(FOCUS)
active = scope(ACTIVE)
placeholder = scope(PLACEHOLDER)
first = scope(FIRST)
last = scope(LAST)
disabled = scope(DISABLED)
motion_reduce = scope(MOTION_REDUCE)
