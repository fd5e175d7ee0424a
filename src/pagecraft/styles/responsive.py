"""
Scoped styling through a mutable builder.

``node.responsive(lambda b: b.font(size=TextSize.SM).md(lambda b: b.font(size=TextSize.LG)))``
collects ``text-sm md:text-lg`` and adds them to the node in one step.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, List, Tuple

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
    Modifier,
    ModifierLike,
    Modifiers,
    as_modifier,
    merge_classes,
    normalize_modifiers,
)
from .operation import Modification, StyleOperation
from .stylable import Stylable

Configure = Callable[["ResponsiveBuilder"], Any]


class ResponsiveBuilder(Stylable):
    """
    Accumulates class tokens, prefixing each with the modifiers of the scopes it was added in.
    """

    def __init__(self, modifiers: Modifiers = None) -> None:
        self._scope: List[Modifier] = list(normalize_modifiers(modifiers))
        self._classes: Tuple[str, ...] = ()

    @property
    def modifiers(self) -> Tuple[Modifier, ...]:
        return normalize_modifiers(self._scope)

    @property
    def classes(self) -> Tuple[str, ...]:
        return self._classes

    def add_classes(self, classes: Iterable[str]) -> "ResponsiveBuilder":
        self._classes = merge_classes(self._classes, classes)
        return self

    @contextmanager
    def scope(self, *modifiers: ModifierLike) -> Iterator["ResponsiveBuilder"]:
        added = [as_modifier(modifier) for modifier in modifiers]
        self._scope.extend(added)
        try:
            yield self
        finally:
            del self._scope[len(self._scope) - len(added):]

    def _apply_style(self, operation: StyleOperation, params: Any, on: Modifiers) -> "ResponsiveBuilder":
        with self.scope(*normalize_modifiers(on)):
            return operation.apply_to_builder(self, params)

    def apply(self, *modifications: Modification) -> "ResponsiveBuilder":
        """Resolve declarative modifications against the current scope."""
        for modification in modifications:
            self.add_classes(modification.class_names(self.modifiers))
        return self

    def when(self, *modifiers: ModifierLike, configure: Configure) -> "ResponsiveBuilder":
        with self.scope(*modifiers):
            configure(self)
        return self

    def xs(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(XS, configure=configure)

    def sm(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(SM, configure=configure)

    def md(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(MD, configure=configure)

    def lg(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(LG, configure=configure)

    def xl(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(XL, configure=configure)

    def xl2(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(XL2, configure=configure)

    def dark(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(DARK, configure=configure)

    def hover(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(HOVER, configure=configure)

    def focus(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(FOCUS, configure=configure)

    def active(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(ACTIVE, configure=configure)

    def placeholder(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(PLACEHOLDER, configure=configure)

    def first(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(FIRST, configure=configure)

    def last(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(LAST, configure=configure)

    def disabled(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(DISABLED, configure=configure)

    def motion_reduce(self, configure: Configure) -> "ResponsiveBuilder":
        return self.when(MOTION_REDUCE, configure=configure)


def collect(configure: Configure, modifiers: Modifiers = None) -> Tuple[str, ...]:
    """Run ``configure`` against a fresh builder and return its tokens."""
    builder = ResponsiveBuilder(modifiers)
    configure(builder)
    return builder.classes
