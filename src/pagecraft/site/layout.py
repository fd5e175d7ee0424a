"""
Header and footer chrome rendered through the node API.
"""

from __future__ import annotations

import datetime
from typing import List, Optional

from ..markup import Fragment, Markup, footer, header, link, list_item, navigation, stack, text, unordered_list
from ..markup.node import Content
from ..styles import Edge, TextSize, Weight
from .metadata import Metadata
from .routes import FooterVariant, HeaderVariant, Layout, Route


def route_link(route: Route, **options) -> Markup:
    return link(route.label, href=route.href, new_tab=route.new_tab, **options)


def _navigation_list(routes: List[Route]) -> Markup:
    items = [list_item(route_link(route)) for route in routes]
    return navigation(unordered_list(items).margins(0).padding(0).font(weight=Weight.MEDIUM))


def render_header(layout: Layout, metadata: Metadata) -> Optional[Markup]:
    if layout.header is HeaderVariant.HIDDEN:
        return None
    logo = stack(metadata.site or "", classes=["logo"]).font(size=TextSize.LG, weight=Weight.BOLD)
    if layout.header is HeaderVariant.LOGO_CENTERED:
        return header(logo, _navigation_list(layout.navigation), classes=["header-centered"]).font(
            alignment="center"
        ).padding(4)
    return header(logo, _navigation_list(layout.navigation), classes=["header-normal"]).padding(4)


def render_footer(layout: Layout, metadata: Metadata, year: Optional[int] = None) -> Optional[Markup]:
    if layout.footer is FooterVariant.HIDDEN:
        return None
    year = year or datetime.date.today().year
    copyright_line = f"© {metadata.site or ''} {year}".replace("  ", " ")
    if layout.footer is FooterVariant.MINIMAL:
        return footer(text(copyright_line), classes=["footer-minimal"]).padding(4)

    grid = navigation([route_link(route) for route in layout.sitemap_routes], classes=["footer-grid"])
    lower: List[Content] = [text(copyright_line, tag="span")]
    if metadata.twitter:
        handle = metadata.twitter.lstrip("@")
        lower.append(
            stack(link("Twitter", href=f"https://twitter.com/{handle}", new_tab=True), classes=["social-icons"])
        )
    return footer(
        stack(metadata.site or "", classes=["logo"]),
        grid,
        stack(lower, classes=["footer-lower"]),
        classes=["footer-normal"],
    ).padding(4).border(at=Edge.TOP)


def wrap_with_layout(content: Content, layout: Optional[Layout], metadata: Metadata) -> Markup:
    """Surround page content with the layout header and footer."""
    if layout is None:
        return Fragment.of(content)
    return Fragment.of(render_header(layout, metadata), content, render_footer(layout, metadata))
