"""
Pydantic models for validating and hashing site configuration files.
"""

from __future__ import annotations

import hashlib
import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..site.metadata import Metadata
from ..site.robots import RobotsRule
from ..site.routes import FooterVariant, HeaderVariant, Layout, Route
from ..styles.theme import Theme


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class ThemeConfig(BaseModel):
    """
    ``[theme]`` table.

    Attributes:
        breakpoints: Breakpoint overrides, e.g. ``{md = "50rem"}``.
        tokens: Additional ``@theme`` variables.
    """
    breakpoints: Dict[str, str] = Field(default_factory=dict)
    tokens: Dict[str, str] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}

    def to_theme(self) -> Optional[Theme]:
        if not self.breakpoints and not self.tokens:
            return None
        return Theme(breakpoints=dict(self.breakpoints), tokens=dict(self.tokens))


class SiteConfig(BaseModel):
    """
    Top-level site configuration.

    Attributes:
        output_dir: Directory the site is built into.
        base_url: Absolute site URL, needed for ``sitemap.xml``.
        assets_dir: Directory copied to ``public/`` in the output.
        max_workers: Thread pool size used while rendering routes.
        strict: Abort the build (without auxiliary files) when any route fails.
        tailwind: Include the Tailwind browser script.
        metadata: Site-level metadata defaults.
        theme: Breakpoint and token overrides.
        header: Header variant.
        footer: Footer variant.
        routes: Navigation routes, from ``[[route]]`` blocks.
        sitemap_routes: Extra sitemap routes, from ``[[sitemap]]`` blocks.
        robots: robots.txt rules, from ``[[robots]]`` blocks.
    """
    output_dir: Optional[Path] = None
    base_url: Optional[str] = None
    assets_dir: Optional[Path] = None
    max_workers: int = Field(default=4, ge=1)
    strict: bool = True
    tailwind: bool = True
    metadata: Metadata = Field(default_factory=Metadata)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    header: HeaderVariant = HeaderVariant.NORMAL
    footer: FooterVariant = FooterVariant.NORMAL
    routes: List[Route] = Field(default_factory=list)
    sitemap_routes: List[Route] = Field(default_factory=list)
    robots: List[RobotsRule] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    @property
    def hash(self) -> str:
        """
        Deterministic hash of the normalized config, used to detect changes.
        """
        payload = self.model_dump(mode="json", round_trip=True)
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()

    @property
    def layout(self) -> Layout:
        return Layout(
            navigation=list(self.routes),
            header=self.header,
            footer=self.footer,
            sitemap=list(self.sitemap_routes),
        )


def load_config(path: Path | str) -> SiteConfig:
    """
    Load and validate a TOML config file into a SiteConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated SiteConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    raw_data = _normalize_toml_schema(raw_data)

    try:
        return SiteConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _normalize_toml_schema(data: Any) -> Dict[str, Any]:
    """
    Normalize TOML-specific schema conveniences to the internal config model.

    Accepts singular table arrays: [[route]] and [[sitemap]], and maps them to the
    internal list fields: routes and sitemap_routes.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a TOML table/object.")

    if "routes" in data:
        raise ConfigError("Use [[route]] blocks (singular) instead of [[routes]].")
    if "sitemaps" in data:
        raise ConfigError("Use [[sitemap]] blocks (singular) instead of [[sitemaps]].")
    if "sitemap_routes" in data:
        raise ConfigError("Use [[sitemap]] blocks to list extra sitemap routes.")

    normalized = dict(data)
    normalized["routes"] = _coerce_table_array(normalized.pop("route", None), "route")
    normalized["sitemap_routes"] = _coerce_table_array(normalized.pop("sitemap", None), "sitemap")
    normalized["robots"] = _coerce_table_array(normalized.pop("robots", None), "robots")
    return normalized


def _coerce_table_array(value: Any, label: str) -> list[dict]:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        if not all(isinstance(item, dict) for item in value):
            raise ConfigError(f"Each [[{label}]] entry must be a table/object.")
        return value
    raise ConfigError(f"Invalid [{label}] block; expected a table or array of tables.")
