"""
Page and site metadata, and the head tags derived from it.
"""

from __future__ import annotations

import datetime
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from ..markup.attributes import attribute, render_tag

DEFAULT_TITLE_SEPARATOR = " | "


class ContentType(str, Enum):
    WEBSITE = "website"
    ARTICLE = "article"
    VIDEO = "video"
    PROFILE = "profile"


class FaviconType(str, Enum):
    ICO = "image/x-icon"
    PNG = "image/png"
    SVG = "image/svg+xml"


_FAVICON_SUFFIXES = {".ico": FaviconType.ICO, ".png": FaviconType.PNG, ".svg": FaviconType.SVG}


class ThemeColor(BaseModel):
    """Browser UI color; ``dark`` adds a ``prefers-color-scheme`` variant."""
    light: str
    dark: Optional[str] = None

    model_config = {"extra": "forbid", "frozen": True}


class Favicon(BaseModel):
    """
    A favicon with an optional dark-scheme variant.

    Attributes:
        light: Icon URL used by default (or under a light color scheme).
        dark: Icon URL for dark color schemes.
        type: MIME type; inferred from the ``light`` suffix when omitted.
        size: ``sizes`` value such as ``"32x32"``.
    """
    light: str
    dark: Optional[str] = None
    type: Optional[FaviconType] = None
    size: Optional[str] = None

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _infer_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("type") and isinstance(data.get("light"), str):
            suffix = PurePosixPath(data["light"]).suffix.lower()
            data = {**data, "type": _FAVICON_SUFFIXES.get(suffix, FaviconType.ICO)}
        return data

    def tags(self) -> List[str]:
        mime = self.type.value if self.type else None
        sizes = attribute("sizes", self.size)
        tags: List[str] = []
        if self.dark:
            for href, scheme in ((self.light, "light"), (self.dark, "dark")):
                tags.append(
                    render_tag(
                        "link",
                        [
                            'rel="icon"',
                            attribute("type", mime),
                            attribute("href", href),
                            sizes,
                            attribute("media", f"(prefers-color-scheme: {scheme})"),
                        ],
                    )
                )
        else:
            tags.append(render_tag("link", ['rel="icon"', attribute("type", mime), attribute("href", self.light), sizes]))
        if self.type is FaviconType.PNG and self.size:
            tags.append(render_tag("link", ['rel="apple-touch-icon"', sizes, attribute("href", self.light)]))
        return tags


def _meta(kind: str, name: str, content: Optional[str], media: Optional[str] = None) -> str:
    return render_tag("meta", [attribute(kind, name), attribute("content", content), attribute("media", media)])


class Metadata(BaseModel):
    """
    Descriptive metadata for a page or a whole site.

    Site-level values act as defaults; a page's explicitly set values win
    when the two are combined with :meth:`merged`.
    """
    site: Optional[str] = None
    title: Optional[str] = None
    title_separator: str = DEFAULT_TITLE_SEPARATOR
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    image: Optional[str] = None
    author: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    twitter: Optional[str] = None
    locale: str = "en"
    type: ContentType = ContentType.WEBSITE
    theme_color: Optional[ThemeColor] = None
    favicons: List[Favicon] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @property
    def page_title(self) -> str:
        title = (self.title or "").strip()
        site = (self.site or "").strip()
        if title and site:
            return f"{title}{self.title_separator}{site}"
        return title or site

    def merged(self, base: Optional["Metadata"]) -> "Metadata":
        """
        Combine with site-level defaults; values set on this instance take precedence.
        """
        if base is None:
            return self
        updates: Dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None or value == []:
                continue
            updates[name] = value
        return base.model_copy(update=updates)

    def tags(self) -> List[str]:
        tags = [
            _meta("property", "og:title", self.page_title),
            _meta("property", "og:type", self.type.value),
            _meta("name", "twitter:card", "summary_large_image"),
        ]
        if self.description:
            tags.append(_meta("name", "description", self.description))
            tags.append(_meta("property", "og:description", self.description))
        if self.image:
            tags.append(_meta("property", "og:image", self.image))
        if self.author:
            tags.append(_meta("name", "author", self.author))
        if self.twitter:
            tags.append(_meta("name", "twitter:creator", f"@{self.twitter.lstrip('@')}"))
        if self.keywords:
            tags.append(_meta("name", "keywords", ", ".join(self.keywords)))
        if self.theme_color is not None:
            light_media = "(prefers-color-scheme: light)" if self.theme_color.dark else None
            tags.append(_meta("name", "theme-color", self.theme_color.light, light_media))
            if self.theme_color.dark:
                tags.append(_meta("name", "theme-color", self.theme_color.dark, "(prefers-color-scheme: dark)"))
        for favicon in self.favicons:
            tags.extend(favicon.tags())
        return tags
