"""
Border, corner radius and shadow families.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .color import ColorLike, color_token, parse_color
from .operation import StyleOperation, StyleParameters
from .spacing import normalize_edges
from .types import BorderStyle, Edge, RadiusSide, RadiusSize, ShadowSize, coerce_enum, coerce_int


@dataclass(frozen=True)
class BorderParameters:
    width: Optional[int] = 1
    edges: Tuple[Edge, ...] = (Edge.ALL,)
    style: Optional[BorderStyle] = None
    color: Optional[ColorLike] = None

    def __post_init__(self) -> None:
        width = coerce_int(self.width)
        object.__setattr__(self, "width", None if width is None else max(0, width))
        object.__setattr__(self, "edges", normalize_edges(self.edges))
        object.__setattr__(self, "style", coerce_enum(BorderStyle, self.style))
        object.__setattr__(self, "color", parse_color(self.color))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "BorderParameters":
        return cls(
            width=bag.get("width"),
            edges=bag.get("edges", (Edge.ALL,)),
            style=coerce_enum(BorderStyle, bag.get("style")),
            color=bag.get("color"),
        )


class BorderStyleOperation(StyleOperation):
    name = "border"
    parameters = BorderParameters

    def apply_classes(self, params: BorderParameters) -> List[str]:
        classes = []
        for edge in params.edges:
            if params.style is BorderStyle.DIVIDE:
                if params.width is not None:
                    axis = "x" if edge is Edge.HORIZONTAL else "y"
                    classes.append(f"divide-{axis}-{params.width}")
                continue
            prefix = "border" if edge is Edge.ALL else f"border-{edge.value}"
            classes.append(prefix if params.width is None else f"{prefix}-{params.width}")
        if params.style is not None and params.style is not BorderStyle.DIVIDE:
            classes.append(f"border-{params.style.value}")
        token = color_token(params.color)
        if token:
            classes.append(f"border-{token}")
        return classes


SidesLike = Union[RadiusSide, str, Iterable[Union[RadiusSide, str]], None]


def normalize_sides(sides: SidesLike) -> Tuple[RadiusSide, ...]:
    if sides is None or isinstance(sides, (RadiusSide, str)):
        sides = () if sides is None else (sides,)
    resolved = []
    for side in sides:
        member = coerce_enum(RadiusSide, side)
        if member is not None and member not in resolved:
            resolved.append(member)
    return tuple(resolved) or (RadiusSide.ALL,)


@dataclass(frozen=True)
class RadiusParameters:
    size: Optional[RadiusSize] = RadiusSize.MD
    sides: Tuple[RadiusSide, ...] = (RadiusSide.ALL,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", coerce_enum(RadiusSize, self.size))
        object.__setattr__(self, "sides", normalize_sides(self.sides))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "RadiusParameters":
        return cls(
            size=coerce_enum(RadiusSize, bag.get("size"), RadiusSize.MD),
            sides=bag.get("sides", (RadiusSide.ALL,)),
        )


class RadiusStyleOperation(StyleOperation):
    """``rounded``, ``rounded-t-lg``, ``rounded-full``"""

    name = "rounded"
    parameters = RadiusParameters

    def apply_classes(self, params: RadiusParameters) -> List[str]:
        size = f"-{params.size.value}" if params.size is not None else ""
        return [
            f"rounded{'' if side is RadiusSide.ALL else '-' + side.value}{size}"
            for side in params.sides
        ]


@dataclass(frozen=True)
class ShadowParameters:
    size: Optional[ShadowSize] = ShadowSize.MD
    color: Optional[ColorLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", coerce_enum(ShadowSize, self.size, ShadowSize.MD))
        object.__setattr__(self, "color", parse_color(self.color))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "ShadowParameters":
        return cls(
            size=coerce_enum(ShadowSize, bag.get("size"), ShadowSize.MD),
            color=bag.get("color"),
        )


class ShadowStyleOperation(StyleOperation):
    name = "shadow"
    parameters = ShadowParameters

    def apply_classes(self, params: ShadowParameters) -> List[str]:
        classes = [f"shadow-{params.size.value}"]
        token = color_token(params.color)
        if token:
            classes.append(f"shadow-{token}")
        return classes


BORDER = BorderStyleOperation()
RADIUS = RadiusStyleOperation()
SHADOW = ShadowStyleOperation()
