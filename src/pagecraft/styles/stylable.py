"""
One definition of every style method.

:class:`Stylable` turns keyword arguments into a family's parameters and
hands them to :meth:`_apply_style`. Nodes, the responsive builder and the
declarative DSL each implement that hook with a different entry point of
:class:`~pagecraft.styles.operation.StyleOperation`, so a new family only
needs one method here to show up on all three surfaces.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .background import BACKGROUND, BackgroundParameters
from .border import BORDER, RADIUS, SHADOW, BorderParameters, RadiusParameters, ShadowParameters, SidesLike
from .color import ColorLike
from .modifiers import Modifiers
from .opacity import OPACITY, OpacityParameters
from .operation import StyleOperation, StyleParameters
from .spacing import MARGINS, PADDING, EdgesLike, MarginsParameters, PaddingParameters
from .types import (
    Alignment,
    BorderStyle,
    Decoration,
    Edge,
    Leading,
    RadiusSide,
    RadiusSize,
    ShadowSize,
    TextSize,
    Tracking,
    Weight,
    Wrapping,
)
from .typography import FONT, FontParameters
from .visibility import VISIBILITY, VisibilityParameters


class Stylable:
    def _apply_style(self, operation: StyleOperation, params: Any, on: Modifiers) -> Any:
        raise NotImplementedError

    def style(
        self,
        operation: StyleOperation,
        params: Union[StyleParameters, Mapping[str, Any], Any],
        *,
        on: Modifiers = None,
    ) -> Any:
        """Apply any operation with its parameters, a bag or a plain mapping."""
        return self._apply_style(operation, params, on)

    def background(self, color: Optional[ColorLike] = None, *, on: Modifiers = None) -> Any:
        return self._apply_style(BACKGROUND, BackgroundParameters(color=color), on)

    def margins(
        self,
        length: Optional[int] = 4,
        *,
        at: EdgesLike = Edge.ALL,
        auto: bool = False,
        on: Modifiers = None,
    ) -> Any:
        return self._apply_style(MARGINS, MarginsParameters(length=length, edges=at, auto=auto), on)

    def padding(self, length: Optional[int] = 4, *, at: EdgesLike = Edge.ALL, on: Modifiers = None) -> Any:
        return self._apply_style(PADDING, PaddingParameters(length=length, edges=at), on)

    def hidden(self, is_hidden: bool = True, *, on: Modifiers = None) -> Any:
        return self._apply_style(VISIBILITY, VisibilityParameters(is_hidden=is_hidden), on)

    def border(
        self,
        width: Optional[int] = None,
        *,
        at: EdgesLike = Edge.ALL,
        style: Optional[BorderStyle] = None,
        color: Optional[ColorLike] = None,
        on: Modifiers = None,
    ) -> Any:
        params = BorderParameters(width=width, edges=at, style=style, color=color)
        return self._apply_style(BORDER, params, on)

    def rounded(
        self,
        size: Optional[RadiusSize] = RadiusSize.MD,
        *,
        sides: SidesLike = RadiusSide.ALL,
        on: Modifiers = None,
    ) -> Any:
        return self._apply_style(RADIUS, RadiusParameters(size=size, sides=sides), on)

    def shadow(
        self,
        size: Optional[ShadowSize] = ShadowSize.MD,
        *,
        color: Optional[ColorLike] = None,
        on: Modifiers = None,
    ) -> Any:
        return self._apply_style(SHADOW, ShadowParameters(size=size, color=color), on)

    def font(
        self,
        *,
        size: Optional[TextSize] = None,
        weight: Optional[Weight] = None,
        alignment: Optional[Alignment] = None,
        tracking: Optional[Tracking] = None,
        leading: Optional[Leading] = None,
        decoration: Optional[Decoration] = None,
        wrapping: Optional[Wrapping] = None,
        color: Optional[ColorLike] = None,
        family: Optional[str] = None,
        on: Modifiers = None,
    ) -> Any:
        params = FontParameters(
            size=size,
            weight=weight,
            alignment=alignment,
            tracking=tracking,
            leading=leading,
            decoration=decoration,
            wrapping=wrapping,
            color=color,
            family=family,
        )
        return self._apply_style(FONT, params, on)

    def opacity(self, value: int = 100, *, on: Modifiers = None) -> Any:
        return self._apply_style(OPACITY, OpacityParameters(value=value), on)
