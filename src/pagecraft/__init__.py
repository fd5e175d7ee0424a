"""
Declarative HTML documents with utility-class styling and static site builds.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("pagecraft")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from .markup import Element, Fragment, Markup, Raw, Text
from .site import BuildError, BuildReport, Document, Layout, Metadata, Route, Website
from .styles import Color, Modifier, ResponsiveBuilder, Theme

__all__ = [
    "__version__",
    "BuildError",
    "BuildReport",
    "Color",
    "Document",
    "Element",
    "Fragment",
    "Layout",
    "Markup",
    "Metadata",
    "Modifier",
    "Raw",
    "ResponsiveBuilder",
    "Route",
    "Text",
    "Theme",
    "Website",
]
