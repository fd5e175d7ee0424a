from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .operation import StyleOperation, StyleParameters
from .types import coerce_int

DEFAULT_OPACITY = 100


def clamp_opacity(value: object) -> int:
    return min(100, max(0, coerce_int(value, DEFAULT_OPACITY)))


@dataclass(frozen=True)
class OpacityParameters:
    value: int = DEFAULT_OPACITY

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", clamp_opacity(self.value))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "OpacityParameters":
        return cls(value=bag.get("value", DEFAULT_OPACITY))


class OpacityStyleOperation(StyleOperation):
    """``opacity-<0..100>``"""

    name = "opacity"
    parameters = OpacityParameters

    def apply_classes(self, params: OpacityParameters) -> List[str]:
        return [f"opacity-{params.value}"]


OPACITY = OpacityStyleOperation()
