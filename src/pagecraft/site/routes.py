"""
Navigation routes and the page layout configuration.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from ..util.text import path_formatted

_EXTERNAL_PREFIXES = ("http://", "https://", "//", "mailto:", "tel:")


class HeaderVariant(str, Enum):
    HIDDEN = "hidden"
    NORMAL = "normal"
    LOGO_CENTERED = "logo-centered"


class FooterVariant(str, Enum):
    HIDDEN = "hidden"
    NORMAL = "normal"
    MINIMAL = "minimal"


class Route(BaseModel):
    """
    A labelled link target.

    Attributes:
        label: Link text.
        path: Site-relative path (``about``, ``/blog/first``) or an absolute URL.
        new_tab: Open the link in a new browsing context.
    """
    label: str
    path: str
    new_tab: bool = False

    model_config = {"extra": "forbid", "frozen": True}

    @property
    def is_external(self) -> bool:
        return self.path.strip().lower().startswith(_EXTERNAL_PREFIXES)

    @property
    def normalized_path(self) -> str:
        """Site-relative path without slashes or ``.html``; empty for the index."""
        return self.path if self.is_external else path_formatted(self.path)

    @property
    def href(self) -> str:
        if self.is_external:
            return self.path
        return f"/{self.normalized_path}"


def unique_routes(routes: List[Route]) -> List[Route]:
    """Drop later routes that point at an already listed path."""
    seen = set()
    unique = []
    for route in routes:
        if route.normalized_path in seen:
            continue
        seen.add(route.normalized_path)
        unique.append(route)
    return unique


class Layout(BaseModel):
    """
    Site chrome: header/footer variants, navigation and extra sitemap routes.
    """
    navigation: List[Route] = Field(default_factory=list)
    header: HeaderVariant = HeaderVariant.NORMAL
    footer: FooterVariant = FooterVariant.NORMAL
    sitemap: List[Route] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @property
    def sitemap_routes(self) -> List[Route]:
        """Navigation followed by the extra routes, de-duplicated by path."""
        return unique_routes([*self.navigation, *self.sitemap])
