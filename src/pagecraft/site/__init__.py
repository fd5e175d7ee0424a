from .document import Document
from .layout import render_footer, render_header
from .metadata import ContentType, Favicon, FaviconType, Metadata, ThemeColor
from .robots import RobotsRule, render_robots
from .routes import FooterVariant, HeaderVariant, Layout, Route
from .sitemap import ChangeFrequency, SitemapEntry, entries_for_routes, render_sitemap
from .website import BuildError, BuildReport, Website

__all__ = [
    "BuildError",
    "BuildReport",
    "ChangeFrequency",
    "ContentType",
    "Document",
    "Favicon",
    "FaviconType",
    "FooterVariant",
    "HeaderVariant",
    "Layout",
    "Metadata",
    "RobotsRule",
    "Route",
    "SitemapEntry",
    "ThemeColor",
    "Website",
    "entries_for_routes",
    "render_footer",
    "render_header",
    "render_robots",
    "render_sitemap",
]
