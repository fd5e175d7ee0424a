"""
Margin and padding families.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .operation import StyleOperation, StyleParameters
from .types import Edge, coerce_bool, coerce_enum, coerce_int

EdgesLike = Union[Edge, str, Iterable[Union[Edge, str]], None]


def normalize_edges(edges: EdgesLike) -> Tuple[Edge, ...]:
    """Coerce one edge or many to a non-empty tuple; unknown names are dropped."""
    if edges is None or isinstance(edges, (Edge, str)):
        edges = () if edges is None else (edges,)
    resolved = []
    for edge in edges:
        member = coerce_enum(Edge, edge)
        if member is not None and member not in resolved:
            resolved.append(member)
    return tuple(resolved) or (Edge.ALL,)


DEFAULT_LENGTH = 4


def clamp_length(length: object, default: Optional[int] = DEFAULT_LENGTH) -> Optional[int]:
    """Non-negative spacing step; None stays None, unreadable values become ``default``."""
    if length is None:
        return None
    value = coerce_int(length, default)
    return None if value is None else max(0, value)


def _prefix(base: str, edge: Edge) -> str:
    return base if edge is Edge.ALL else f"{base}{edge.value}"


@dataclass(frozen=True)
class MarginsParameters:
    length: Optional[int] = DEFAULT_LENGTH
    edges: Tuple[Edge, ...] = (Edge.ALL,)
    auto: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", clamp_length(self.length))
        object.__setattr__(self, "edges", normalize_edges(self.edges))
        object.__setattr__(self, "auto", coerce_bool(self.auto))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "MarginsParameters":
        return cls(
            length=bag.get("length", DEFAULT_LENGTH),
            edges=bag.get("edges", (Edge.ALL,)),
            auto=bag.get("auto", False),
        )


class MarginsStyleOperation(StyleOperation):
    """``m-4``, ``mt-2``, ``mx-auto``"""

    name = "margins"
    parameters = MarginsParameters

    def apply_classes(self, params: MarginsParameters) -> List[str]:
        classes = []
        for edge in params.edges:
            prefix = _prefix("m", edge)
            if params.auto:
                classes.append(f"{prefix}-auto")
            elif params.length is not None:
                classes.append(f"{prefix}-{params.length}")
        return classes


@dataclass(frozen=True)
class PaddingParameters:
    length: Optional[int] = DEFAULT_LENGTH
    edges: Tuple[Edge, ...] = (Edge.ALL,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", clamp_length(self.length))
        object.__setattr__(self, "edges", normalize_edges(self.edges))

    @classmethod
    def from_bag(cls, bag: StyleParameters) -> "PaddingParameters":
        return cls(length=bag.get("length", DEFAULT_LENGTH), edges=bag.get("edges", (Edge.ALL,)))


class PaddingStyleOperation(StyleOperation):
    """``p-4``, ``px-2``"""

    name = "padding"
    parameters = PaddingParameters

    def apply_classes(self, params: PaddingParameters) -> List[str]:
        if params.length is None:
            return []
        return [f"{_prefix('p', edge)}-{params.length}" for edge in params.edges]


MARGINS = MarginsStyleOperation()
PADDING = PaddingStyleOperation()
