"""
Multi-page site assembly and the static build.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from ..styles.theme import Theme
from ..util.filesystem import build_lock, copy_tree, reset_directory, write_text_file
from ..util.text import relative_segments
from .document import Document
from .metadata import Metadata
from .robots import RobotsRule, render_robots
from .routes import Layout, Route
from .sitemap import SitemapEntry, entries_for_routes, render_sitemap

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


class BuildError(RuntimeError):
    """Raised once per build when one or more routes failed to render or write."""

    def __init__(self, failures: Mapping[str, str]):
        self.failures: Dict[str, str] = dict(failures)
        listed = ", ".join(sorted(self.failures))
        super().__init__(f"{len(self.failures)} route(s) failed to build: {listed}")


@dataclass
class BuildReport:
    """
    Outcome of :meth:`Website.build`.

    Attributes:
        output_dir: Root directory the site was written to.
        pages: Written page files, in route order.
        failures: Output name mapped to the failure reason.
        sitemap: ``sitemap.xml`` path when one was written.
        robots: ``robots.txt`` path when one was written.
        assets: Copied ``public/`` directory, when assets were provided.
        files: Extra files written from :attr:`Website.files`.
    """
    output_dir: Path
    pages: List[Path] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    sitemap: Optional[Path] = None
    robots: Optional[Path] = None
    assets: Optional[Path] = None
    files: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary_rows(self) -> List[Tuple[str, str]]:
        rows = [
            ("Output", str(self.output_dir)),
            ("Pages", str(len(self.pages))),
            ("Failures", str(len(self.failures))),
            ("Sitemap", str(self.sitemap) if self.sitemap else "-"),
            ("Robots", str(self.robots) if self.robots else "-"),
        ]
        if self.assets:
            rows.append(("Assets", str(self.assets)))
        if self.files:
            rows.append(("Files", ", ".join(path.name for path in self.files)))
        return rows


@dataclass
class Website:
    """
    A collection of documents sharing site metadata, layout and theme.

    Attributes:
        metadata: Site-level metadata defaults.
        routes: Documents to build, one output file each.
        layout: Header/footer chrome and navigation; also drives the sitemap.
        theme: Site theme, emitted as ``@theme`` CSS in every page.
        base_url: Absolute site URL; required for ``sitemap.xml``.
        stylesheets: Stylesheet URLs added to every page.
        scripts: Script URLs added to every page.
        head: Raw markup appended to every ``<head>``.
        sitemap_entries: Extra entries appended to the generated sitemap.
        robots_rules: ``robots.txt`` blocks; allow-all when empty.
        generate_sitemap: Write ``sitemap.xml`` when a base URL is known.
        generate_robots: Write ``robots.txt``.
        tailwind: Include the Tailwind browser script in every page.
        files: Extra text files (relative path to content) written next to the pages.
    """
    metadata: Metadata = field(default_factory=Metadata)
    routes: List[Document] = field(default_factory=list)
    layout: Optional[Layout] = None
    theme: Optional[Theme] = None
    base_url: Optional[str] = None
    stylesheets: List[str] = field(default_factory=list)
    scripts: Dict[str, Optional[str]] = field(default_factory=dict)
    head: Optional[str] = None
    sitemap_entries: List[SitemapEntry] = field(default_factory=list)
    robots_rules: List[RobotsRule] = field(default_factory=list)
    generate_sitemap: bool = True
    generate_robots: bool = True
    tailwind: bool = True
    files: Dict[str, str] = field(default_factory=dict)

    def render_route(self, document: Document) -> str:
        return document.render(
            self.metadata,
            layout=self.layout,
            theme=self.theme,
            stylesheets=self.stylesheets,
            scripts=self.scripts,
            head=self.head,
            tailwind=self.tailwind,
        )

    def sitemap_routes(self) -> List[Route]:
        """
        Routes listed in the sitemap: the layout's navigation and extra routes,
        or every document when the site has no layout.
        """
        if self.layout is not None:
            return self.layout.sitemap_routes
        return [
            Route(label=document.metadata.title or document.resolved_path or "index", path=document.resolved_path)
            for document in self.routes
        ]

    def sitemap_xml(self) -> Optional[str]:
        if not self.generate_sitemap or not self.base_url:
            return None
        return render_sitemap(entries_for_routes(self.base_url, self.sitemap_routes(), self.sitemap_entries))

    def robots_txt(self) -> str:
        sitemap_url = None
        if self.generate_sitemap and self.base_url:
            sitemap_url = f"{self.base_url.rstrip('/')}/sitemap.xml"
        return render_robots(self.robots_rules, sitemap_url)

    def _write_route(self, document: Document, output_dir: Path) -> Path:
        html = self.render_route(document)
        return write_text_file(output_dir / document.output_name, html)

    def build(
        self,
        output_dir: Path | str = "build",
        *,
        assets_dir: Optional[Path | str] = None,
        max_workers: Optional[int] = None,
        strict: bool = True,
    ) -> BuildReport:
        """
        Render every route into ``output_dir``.

        The directory is cleared first. Routes render concurrently; every
        route is attempted even after a failure. ``sitemap.xml`` and
        ``robots.txt`` are written once, after all routes finished.

        Args:
            output_dir: Destination directory.
            assets_dir: Optional directory copied to ``<output_dir>/public``.
            max_workers: Thread pool size.
            strict: Raise :class:`BuildError` (and skip the auxiliary files)
                when any route failed; otherwise record failures in the report.

        Raises:
            BuildError: In strict mode, when at least one route failed.
        """
        with build_lock(output_dir):
            return self._build_into(output_dir, assets_dir=assets_dir, max_workers=max_workers, strict=strict)

    def _build_into(
        self,
        output_dir: Path | str,
        *,
        assets_dir: Optional[Path | str],
        max_workers: Optional[int],
        strict: bool,
    ) -> BuildReport:
        target = reset_directory(output_dir)
        report = BuildReport(output_dir=target)
        logger.info("Building %s route(s) into %s", len(self.routes), target)

        if assets_dir is not None:
            report.assets = copy_tree(assets_dir, target / "public")

        for name, content in self.files.items():
            relative = relative_segments(name)
            if not relative:
                report.failures[name] = "empty file name"
                logger.error("Skipping extra file with empty name %r", name)
                continue
            report.files.append(write_text_file(target / relative, content))

        scheduled: List[Document] = []
        claimed: Dict[str, int] = {}
        for index, document in enumerate(self.routes):
            name = document.output_name
            if name in claimed:
                report.failures[f"{name}#{index}"] = f"duplicate output path {name} (route {claimed[name]})"
                logger.error("Route %s maps to %s, already produced by route %s", index, name, claimed[name])
                continue
            claimed[name] = index
            scheduled.append(document)

        written: Dict[str, Path] = {}
        workers = max(1, max_workers or DEFAULT_MAX_WORKERS)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {pool.submit(self._write_route, document, target): document for document in scheduled}
            for future in as_completed(futures):
                name = futures[future].output_name
                try:
                    written[name] = future.result()
                except Exception as exc:
                    logger.error("Failed to build %s: %s", name, exc)
                    report.failures[name] = f"{type(exc).__name__}: {exc}"
                else:
                    logger.debug("Wrote %s", written[name])

        report.pages = [written[document.output_name] for document in scheduled if document.output_name in written]

        if report.failures and strict:
            raise BuildError(report.failures)

        sitemap = self.sitemap_xml()
        if sitemap is not None:
            report.sitemap = write_text_file(target / "sitemap.xml", sitemap)
        if self.generate_robots:
            report.robots = write_text_file(target / "robots.txt", self.robots_txt())

        logger.info(
            "Build finished: %s page(s) written, %s failure(s)",
            len(report.pages),
            len(report.failures),
        )
        return report
