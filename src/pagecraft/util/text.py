"""
String helpers for page paths and HTML escaping.
"""

from __future__ import annotations

import hashlib
import html
import re

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Derive an output path from a page title.

    Titles with no ASCII letters or digits fall back to a short digest so
    distinct titles still map to distinct files.
    """
    raw = (value or "").strip().lower()
    slug = _SLUG_PATTERN.sub("-", raw).strip("-")
    if slug:
        return slug
    digest = hashlib.sha1(raw.encode("utf-8")).hexdigest()[:8]
    return f"page-{digest}"


def escape_html(value: str) -> str:
    """Escape text for use in element content or a quoted attribute value."""
    return html.escape(value, quote=True).replace("&#x27;", "&#39;")


def relative_segments(value: str) -> str:
    """Join the non-empty path segments of ``value``, dropping ``.`` and ``..``."""
    return "/".join(part for part in (value or "").split("/") if part not in ("", ".", ".."))


def path_formatted(value: str) -> str:
    """
    Normalise a route path: no surrounding slashes, no ``.html`` suffix and
    no ``.`` or ``..`` segments, so the result always stays inside the
    output directory.

    An empty result means the site index.
    """
    cleaned = (value or "").strip().strip("/")
    if cleaned.endswith(".html"):
        cleaned = cleaned[: -len(".html")]
    if cleaned == "index":
        return ""
    return relative_segments(cleaned)
