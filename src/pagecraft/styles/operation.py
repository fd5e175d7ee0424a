"""
The style-operation dispatcher.

A style family implements :meth:`StyleOperation.apply_classes` once. Direct
node calls, the responsive builder and declarative modification values all
reuse that computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple, Type, Union

from .modifiers import Modifier, Modifiers, combine_classes, normalize_modifiers


class StyleParameters:
    """
    Generic name-to-value bag handed to :meth:`StyleOperation.from_bag`.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        self._values: Dict[str, Any] = dict(values or {})
        self._values.update(kwargs)

    def get(self, key: str, default: Any = None) -> Any:
        value = self._values.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> "StyleParameters":
        updated = dict(self._values)
        updated[key] = value
        return StyleParameters(updated)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"StyleParameters({self._values!r})"


class Modification:
    """A deferred style intent, resolved against the modifiers of its enclosing scopes."""

    def class_names(self, outer: Modifiers = None) -> List[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class StyleModification(Modification):
    classes: Tuple[str, ...]
    modifiers: Tuple[Modifier, ...] = ()

    def class_names(self, outer: Modifiers = None) -> List[str]:
        return combine_classes(self.classes, (*normalize_modifiers(outer), *self.modifiers))


@dataclass(frozen=True)
class ScopedModification(Modification):
    """Children evaluated one scope deeper, e.g. ``md(font(size=...))``."""
    modifiers: Tuple[Modifier, ...]
    children: Tuple[Modification, ...]

    def class_names(self, outer: Modifiers = None) -> List[str]:
        scope = (*normalize_modifiers(outer), *self.modifiers)
        classes: List[str] = []
        for child in self.children:
            classes.extend(child.class_names(scope))
        return classes


@dataclass(frozen=True)
class CompositeModification(Modification):
    children: Tuple[Modification, ...]

    def class_names(self, outer: Modifiers = None) -> List[str]:
        classes: List[str] = []
        for child in self.children:
            classes.extend(child.class_names(outer))
        return classes


ParamsLike = Union[Any, StyleParameters, Mapping[str, Any]]


class StyleOperation:
    """
    Base class for one style family.

    Subclasses set ``name`` and ``parameters`` (a frozen dataclass with a
    ``from_bag`` classmethod) and implement :meth:`apply_classes`.
    """

    name: ClassVar[str] = ""
    parameters: ClassVar[Type[Any]]

    def apply_classes(self, params: Any) -> List[str]:
        raise NotImplementedError

    def from_bag(self, bag: Union[StyleParameters, Mapping[str, Any]]) -> Any:
        if not isinstance(bag, StyleParameters):
            bag = StyleParameters(bag)
        return self.parameters.from_bag(bag)

    def _resolve(self, params: ParamsLike) -> Any:
        if isinstance(params, self.parameters):
            return params
        return self.from_bag(params)

    def class_names(self, params: ParamsLike, modifiers: Modifiers = None) -> List[str]:
        return combine_classes(self.apply_classes(self._resolve(params)), modifiers)

    def apply_to(self, markup: Any, params: ParamsLike, modifiers: Modifiers = None) -> Any:
        """Return a copy of ``markup`` carrying the (prefixed) class tokens."""
        return markup.adding_classes(self.class_names(params, modifiers))

    def apply_to_builder(self, builder: Any, params: ParamsLike) -> Any:
        """Add the tokens to ``builder`` under its current scope and return it."""
        builder.add_classes(self.class_names(params, builder.modifiers))
        return builder

    def as_modification(self, params: ParamsLike, modifiers: Modifiers = None) -> StyleModification:
        return StyleModification(
            tuple(self.apply_classes(self._resolve(params))),
            normalize_modifiers(modifiers),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
