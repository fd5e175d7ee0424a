from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .operation import StyleOperation, StyleParameters
from .types import coerce_bool


@dataclass(frozen=True)
class VisibilityParameters:
    is_hidden: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "is_hidden", coerce_bool(self.is_hidden, True))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "VisibilityParameters":
        return cls(is_hidden=bag.get("is_hidden", True))


class VisibilityStyleOperation(StyleOperation):
    name = "hidden"
    parameters = VisibilityParameters

    def apply_classes(self, params: VisibilityParameters) -> List[str]:
        return ["hidden"] if params.is_hidden else []


VISIBILITY = VisibilityStyleOperation()
