"""
sitemap.xml generation.
"""

from __future__ import annotations

import datetime
import logging
from enum import Enum
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, field_validator

from ..util.text import escape_html
from .routes import Route, unique_routes

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


class ChangeFrequency(str, Enum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class SitemapEntry(BaseModel):
    url: str
    last_modified: Optional[Union[datetime.datetime, datetime.date]] = None
    change_frequency: Optional[ChangeFrequency] = None
    priority: Optional[float] = None

    model_config = {"extra": "forbid"}

    @field_validator("priority")
    @classmethod
    def _clamp_priority(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return None
        return min(1.0, max(0.0, value))

    def render(self) -> str:
        lines = ["  <url>", f"    <loc>{escape_html(self.url)}</loc>"]
        if self.last_modified is not None:
            lines.append(f"    <lastmod>{self.last_modified.isoformat()}</lastmod>")
        if self.change_frequency is not None:
            lines.append(f"    <changefreq>{self.change_frequency.value}</changefreq>")
        if self.priority is not None:
            lines.append(f"    <priority>{self.priority:.1f}</priority>")
        lines.append("  </url>")
        return "\n".join(lines)


def location(base_url: str, path: str) -> str:
    """Absolute URL of the artifact written for ``path``."""
    base = base_url.rstrip("/")
    return f"{base}/" if not path else f"{base}/{path}.html"


def priority_for(path: str) -> float:
    if not path:
        return 1.0
    depth = len(path.split("/"))
    return round(max(0.5, 1.0 - depth * 0.1), 1)


def change_frequency_for(path: str) -> ChangeFrequency:
    depth = len(path.split("/")) if path else 0
    if depth == 0:
        return ChangeFrequency.WEEKLY
    if depth == 1:
        return ChangeFrequency.MONTHLY
    return ChangeFrequency.YEARLY


def entries_for_routes(
    base_url: str,
    routes: Iterable[Route],
    extra: Iterable[SitemapEntry] = (),
) -> List[SitemapEntry]:
    """
    Sitemap entries for site-relative routes followed by ``extra``, keyed by location.

    External routes are skipped; a location listed twice keeps its first entry.
    """
    entries: List[SitemapEntry] = []
    for route in unique_routes(list(routes)):
        if route.is_external:
            logger.debug("Skipping external route %s in sitemap", route.path)
            continue
        path = route.normalized_path
        entries.append(
            SitemapEntry(
                url=location(base_url, path),
                change_frequency=change_frequency_for(path),
                priority=priority_for(path),
            )
        )
    entries.extend(extra)
    seen = set()
    unique: List[SitemapEntry] = []
    for entry in entries:
        if entry.url in seen:
            continue
        seen.add(entry.url)
        unique.append(entry)
    return unique


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    body = "\n".join(entry.render() for entry in entries)
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', f'<urlset xmlns="{SITEMAP_NAMESPACE}">']
    if body:
        lines.append(body)
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"
