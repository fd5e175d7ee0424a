"""
Generate a placeholder site from a configuration file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..config.models import SiteConfig
from ..config.settings import Settings
from ..markup import heading, link, list_item, section, stack, text, unordered_list
from ..styles import Color, TextSize, Weight
from .document import Document
from .metadata import Favicon, Metadata
from .routes import Route
from .website import BuildReport, Website

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("build")
FAVICON_FILENAME = "favicon.svg"
FAVICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64" role="img" aria-label="pagecraft favicon">
  <rect x="4" y="4" width="56" height="56" rx="12" fill="#0f172a"/>
  <path d="M20 16 h16 a12 12 0 0 1 0 24 h-8 v8 h-8 Z" fill="#38bdf8"/>
  <rect x="28" y="24" width="8" height="8" rx="2" fill="#0f172a"/>
</svg>
"""
PLACEHOLDER_TEXT = "Content will be added here."


def resolve_output_dir(config: SiteConfig, settings: Optional[Settings] = None) -> Path:
    """
    Determine the absolute build directory: config, then environment, then the default.
    """
    root = config.output_dir or (settings.output_dir if settings else None) or DEFAULT_OUTPUT_DIR
    return Path(root).expanduser().resolve()


def resolve_base_url(config: SiteConfig, settings: Optional[Settings] = None) -> Optional[str]:
    return config.base_url or (settings.base_url if settings else None)


def placeholder_page(route: Route) -> Document:
    """A page with a heading and a link back to the menu."""
    return Document(
        Metadata(title=route.label),
        section(
            heading(1, route.label).font(size=TextSize.XL3, weight=Weight.BOLD),
            stack(text(PLACEHOLDER_TEXT), id="page-content").padding(4).rounded().border(),
            text(link("Return to Menu", href="/").font(weight=Weight.BOLD, color=Color("sky", 700))),
        ).margins(auto=True, at="x").padding(6),
        path=route.normalized_path,
    )


def menu_page(config: SiteConfig, routes: List[Route]) -> Document:
    title = config.metadata.site or "Site Menu"
    if routes:
        items = [list_item(link(route.label, href=route.href, new_tab=route.new_tab)).margins(2, at="y") for route in routes]
        body = unordered_list(items)
    else:
        body = text("No routes configured.")
    return Document(
        Metadata(title="Menu"),
        section(heading(1, title).font(size=TextSize.XL3, weight=Weight.BOLD), body).padding(6),
        path="",
    )


def website_from_config(config: SiteConfig, settings: Optional[Settings] = None) -> Website:
    """
    Build a :class:`Website` with one placeholder page per navigation route plus an index menu.
    """
    metadata = config.metadata
    if not metadata.favicons:
        metadata = metadata.model_copy(update={"favicons": [Favicon(light=f"/{FAVICON_FILENAME}")]})

    internal = [route for route in config.routes if not route.is_external and route.normalized_path]
    pages = [menu_page(config, config.routes)]
    pages.extend(placeholder_page(route) for route in internal)

    return Website(
        metadata=metadata,
        routes=pages,
        layout=config.layout,
        theme=config.theme.to_theme(),
        base_url=resolve_base_url(config, settings),
        robots_rules=list(config.robots),
        tailwind=config.tailwind,
        files={FAVICON_FILENAME: FAVICON_SVG},
    )


def generate_site(
    config: SiteConfig,
    *,
    output_dir: Optional[Path | str] = None,
    settings: Optional[Settings] = None,
) -> BuildReport:
    """
    Build the placeholder site, default favicon included.

    Args:
        config: Validated site configuration.
        output_dir: Override for the configured output directory.
        settings: Environment settings providing fallbacks.

    Returns:
        The build report.
    """
    root = Path(output_dir).expanduser().resolve() if output_dir else resolve_output_dir(config, settings)
    website = website_from_config(config, settings)
    report = website.build(
        root,
        assets_dir=config.assets_dir,
        max_workers=config.max_workers,
        strict=config.strict,
    )
    logger.info("Scaffolded %s page(s) under %s", len(report.pages), root)
    return report
