from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .color import ColorLike, color_token, parse_color
from .operation import StyleOperation, StyleParameters


@dataclass(frozen=True)
class BackgroundParameters:
    color: Optional[ColorLike] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", parse_color(self.color))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "BackgroundParameters":
        return cls(color=bag.get("color"))


class BackgroundStyleOperation(StyleOperation):
    """``bg-<color>``"""

    name = "background"
    parameters = BackgroundParameters

    def apply_classes(self, params: BackgroundParameters) -> List[str]:
        token = color_token(params.color)
        return [f"bg-{token}"] if token else []


BACKGROUND = BackgroundStyleOperation()
