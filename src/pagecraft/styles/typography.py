"""
Font family: size, weight, alignment, tracking, leading, decoration,
wrapping, text color and font family tokens, emitted in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .color import ColorLike, color_token, parse_color
from .operation import StyleOperation, StyleParameters
from .types import Alignment, Decoration, Leading, TextSize, Tracking, Weight, Wrapping, coerce_enum

_FIELDS = (
    ("size", TextSize),
    ("weight", Weight),
    ("alignment", Alignment),
    ("tracking", Tracking),
    ("leading", Leading),
    ("decoration", Decoration),
    ("wrapping", Wrapping),
)


@dataclass(frozen=True)
class FontParameters:
    size: Optional[TextSize] = None
    weight: Optional[Weight] = None
    alignment: Optional[Alignment] = None
    tracking: Optional[Tracking] = None
    leading: Optional[Leading] = None
    decoration: Optional[Decoration] = None
    wrapping: Optional[Wrapping] = None
    color: Optional[ColorLike] = None
    family: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name, enum_type in _FIELDS:
            object.__setattr__(self, field_name, coerce_enum(enum_type, getattr(self, field_name)))
        object.__setattr__(self, "color", parse_color(self.color))
        if self.family is not None:
            object.__setattr__(self, "family", str(self.family))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "FontParameters":
        values = {field_name: coerce_enum(enum_type, bag.get(field_name)) for field_name, enum_type in _FIELDS}
        return cls(color=bag.get("color"), family=bag.get("family"), **values)


class FontStyleOperation(StyleOperation):
    name = "font"
    parameters = FontParameters

    def apply_classes(self, params: FontParameters) -> List[str]:
        classes = [
            member.class_name
            for member in (getattr(params, field_name) for field_name, _ in _FIELDS)
            if member is not None
        ]
        token = color_token(params.color)
        if token:
            classes.append(f"text-{token}")
        if params.family and params.family.strip():
            family = params.family.strip().replace(" ", "_")
            classes.append(f"font-[{family}]")
        return classes


FONT = FontStyleOperation()
