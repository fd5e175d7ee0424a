from .color import Color, parse_color
from .modifiers import (
    ACTIVE,
    BREAKPOINTS,
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
    ModifierKind,
    combine_classes,
    combine_prefix,
    merge_classes,
)
from .operation import (
    CompositeModification,
    Modification,
    ScopedModification,
    StyleModification,
    StyleOperation,
    StyleParameters,
)
from .responsive import ResponsiveBuilder
from .stylable import Stylable
from .theme import DEFAULT_BREAKPOINTS, Theme
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

__all__ = [
    "ACTIVE",
    "BREAKPOINTS",
    "DARK",
    "DEFAULT_BREAKPOINTS",
    "DISABLED",
    "FIRST",
    "FOCUS",
    "HOVER",
    "LAST",
    "LG",
    "MD",
    "MOTION_REDUCE",
    "PLACEHOLDER",
    "SM",
    "XL",
    "XL2",
    "XS",
    "Alignment",
    "BorderStyle",
    "Color",
    "CompositeModification",
    "Decoration",
    "Edge",
    "Leading",
    "Modification",
    "Modifier",
    "ModifierKind",
    "RadiusSide",
    "RadiusSize",
    "ResponsiveBuilder",
    "ScopedModification",
    "ShadowSize",
    "Stylable",
    "StyleModification",
    "StyleOperation",
    "StyleParameters",
    "TextSize",
    "Theme",
    "Tracking",
    "Weight",
    "Wrapping",
    "combine_classes",
    "combine_prefix",
    "merge_classes",
    "parse_color",
]
