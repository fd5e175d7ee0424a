"""
Full-page HTML documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from ..markup.attributes import attribute, render_tag
from ..markup.node import Content, flatten_content
from ..styles.theme import Theme
from ..util.text import escape_html, path_formatted, slugify
from .layout import wrap_with_layout
from .metadata import Metadata
from .routes import Layout

logger = logging.getLogger(__name__)

TAILWIND_BROWSER_SCRIPT = "https://unpkg.com/@tailwindcss/browser@4"
GENERATOR = "pagecraft"


def _script_tag(source: str, loading: Optional[str]) -> str:
    loading_attr = loading if loading in ("defer", "async") else None
    return render_tag("script", [loading_attr, attribute("src", source)])


@dataclass
class Document:
    """
    One page: metadata plus a root node (or a closure producing content).

    Attributes:
        metadata: Page metadata; merged over the site metadata at render time.
        content: Body content, evaluated lazily when the page is rendered.
        path: Output path override (``about``, ``blog/first``); derived from the title when omitted.
        stylesheets: Stylesheet URLs for this page.
        scripts: Script URLs mapped to ``"defer"``, ``"async"`` or None.
        head: Raw markup appended to ``<head>``.
        theme: Page-specific theme, replacing the site theme.
    """
    metadata: Metadata = field(default_factory=Metadata)
    content: Content = None
    path: Optional[str] = None
    stylesheets: List[str] = field(default_factory=list)
    scripts: Dict[str, Optional[str]] = field(default_factory=dict)
    head: Optional[str] = None
    theme: Optional[Theme] = None

    @property
    def resolved_path(self) -> str:
        """
        Output path without extension; empty for the index page.
        """
        if self.path is not None:
            return path_formatted(self.path)
        if self.metadata.title:
            return path_formatted(slugify(self.metadata.title))
        return ""

    @property
    def output_name(self) -> str:
        path = self.resolved_path
        return f"{path}.html" if path else "index.html"

    def head_tags(
        self,
        metadata: Metadata,
        *,
        theme: Optional[Theme] = None,
        stylesheets: Iterable[str] = (),
        scripts: Optional[Mapping[str, Optional[str]]] = None,
        head: Optional[str] = None,
        tailwind: bool = True,
    ) -> List[str]:
        tags = [
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(metadata.page_title)}</title>",
        ]
        tags.extend(metadata.tags())
        tags.append(render_tag("meta", ['name="generator"', attribute("content", GENERATOR)]))

        seen_stylesheets = []
        for href in [*stylesheets, *self.stylesheets]:
            if href not in seen_stylesheets:
                seen_stylesheets.append(href)
                tags.append(render_tag("link", ['rel="stylesheet"', attribute("href", href)]))

        merged_scripts = dict(scripts or {})
        merged_scripts.update(self.scripts)
        tags.extend(_script_tag(source, loading) for source, loading in merged_scripts.items())

        active_theme = self.theme or theme
        theme_css = active_theme.css() if active_theme else ""
        if theme_css:
            tags.append(render_tag("style", ['type="text/tailwindcss"'], theme_css))
        if tailwind:
            tags.append(render_tag("script", [attribute("src", TAILWIND_BROWSER_SCRIPT)]))
        for extra in (head, self.head):
            if extra:
                tags.append(extra)
        return tags

    def render(
        self,
        site_metadata: Optional[Metadata] = None,
        *,
        layout: Optional[Layout] = None,
        theme: Optional[Theme] = None,
        stylesheets: Iterable[str] = (),
        scripts: Optional[Mapping[str, Optional[str]]] = None,
        head: Optional[str] = None,
        tailwind: bool = True,
    ) -> str:
        """
        Render the complete page, doctype through ``</html>``.

        Site-level arguments supply defaults; the page's own metadata, assets
        and theme take precedence.
        """
        metadata = self.metadata.merged(site_metadata)
        logger.debug("Rendering document %s", self.output_name)
        tags = self.head_tags(
            metadata,
            theme=theme,
            stylesheets=stylesheets,
            scripts=scripts,
            head=head,
            tailwind=tailwind,
        )
        root = wrap_with_layout(self.content, layout, metadata)
        body = "".join(node.render() for node in flatten_content(root))
        lang = attribute("lang", metadata.locale)
        return "\n".join(
            [
                "<!DOCTYPE html>",
                f"<html {lang}>" if lang else "<html>",
                "<head>",
                *tags,
                "</head>",
                f"<body>{body}</body>",
                "</html>",
            ]
        )
