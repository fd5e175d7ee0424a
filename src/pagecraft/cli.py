"""
Command line interface for pagecraft.
"""

from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigError, SiteConfig, get_settings, load_config
from .site import BuildError, BuildReport, Website
from .site.scaffold import DEFAULT_OUTPUT_DIR, generate_site, resolve_output_dir
from .site.sitemap import location

console = Console()
app = typer.Typer(help="Build static websites from pagecraft documents.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("PAGECRAFT_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Path) -> Path:
    """Ensure config path exists and return absolute path."""
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Path) -> SiteConfig:
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _import_website(target: str) -> Website:
    """
    Resolve ``module:attribute`` to a Website, calling zero-argument factories.
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise typer.BadParameter(f"Expected MODULE:ATTRIBUTE, got {target!r}")
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module {module_name!r}: {exc}") from exc
    try:
        candidate = getattr(module, attribute)
    except AttributeError as exc:
        raise typer.BadParameter(f"Module {module_name!r} has no attribute {attribute!r}") from exc
    if not isinstance(candidate, Website) and callable(candidate):
        candidate = candidate()
    if not isinstance(candidate, Website):
        raise typer.BadParameter(f"{target} is not a Website (got {type(candidate).__name__})")
    return candidate


def _print_build_report(report: BuildReport) -> None:
    table = Table(title="Build Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)
    if report.failures:
        console.print("[bold red]Some routes failed to build:[/]")
        for name, reason in sorted(report.failures.items()):
            console.print(f"- {name}: {reason}")


def _print_build_error(exc: BuildError) -> None:
    console.print(f"[bold red]Build failed:[/] {exc}")
    for name, reason in sorted(exc.failures.items()):
        console.print(f"- {name}: {reason}")


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show pagecraft version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)
    if version:
        console.print(f"[bold green]pagecraft[/] {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]pagecraft[/] is ready. Run [cyan]pagecraft build package.module:site[/] "
            "to build a website.",
        )


@app.command()
def build(
    target: str = typer.Argument(..., help="Website to build, as MODULE:ATTRIBUTE."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (defaults to PAGECRAFT_OUTPUT_DIR or ./build).",
    ),
    strict: bool = typer.Option(
        True,
        "--strict/--keep-going",
        help="Abort without sitemap/robots when any route fails, or record failures and continue.",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Number of routes rendered concurrently.",
    ),
    assets: Optional[Path] = typer.Option(
        None,
        "--assets",
        help="Directory copied to public/ in the output.",
    ),
) -> None:
    """
    Import a Website and write its pages, sitemap.xml and robots.txt.
    """
    settings = get_settings()
    website = _import_website(target)
    if website.base_url is None and settings.base_url:
        website.base_url = settings.base_url
    output_dir = output or settings.output_dir or DEFAULT_OUTPUT_DIR

    logger.info("Building %s into %s", target, output_dir)
    try:
        report = website.build(output_dir, assets_dir=assets, max_workers=workers, strict=strict)
    except BuildError as exc:
        _print_build_error(exc)
        raise typer.Exit(code=1) from exc

    _print_build_report(report)
    if report.failures:
        raise typer.Exit(code=1)
    console.print("[bold green]Build completed.[/]")


@app.command()
def scaffold(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site configuration TOML file.",
        callback=_resolve_config_path,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output directory (overrides output_dir in the configuration).",
    ),
) -> None:
    """
    Build a placeholder site with one page per configured route plus an index menu.
    """
    site_config = _load_config_or_exit(config)
    logger.info("Loaded configuration with %d routes", len(site_config.routes))
    try:
        report = generate_site(site_config, output_dir=output, settings=get_settings())
    except BuildError as exc:
        _print_build_error(exc)
        raise typer.Exit(code=1) from exc
    _print_build_report(report)
    console.print("[bold green]Scaffold complete.[/]")


@app.command()
def routes(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site configuration TOML file.",
        callback=_resolve_config_path,
    ),
) -> None:
    """
    List configured routes with their output files and sitemap membership.
    """
    site_config = _load_config_or_exit(config)
    settings = get_settings()
    base_url = site_config.base_url or settings.base_url
    in_sitemap = {route.normalized_path for route in site_config.layout.sitemap_routes if not route.is_external}

    table = Table(title="Routes")
    table.add_column("Label")
    table.add_column("Path")
    table.add_column("Output", overflow="fold")
    table.add_column("Sitemap", overflow="fold")
    for route in [*site_config.routes, *site_config.sitemap_routes]:
        if route.is_external:
            table.add_row(route.label, route.path, "external", "no")
            continue
        path = route.normalized_path
        output_name = f"{path}.html" if path else "index.html"
        if path not in in_sitemap:
            member = "no"
        elif base_url:
            member = location(base_url, path)
        else:
            member = "yes (no base_url)"
        table.add_row(route.label, route.href, output_name, member)
    console.print(table)
    console.print(f"Output directory: {resolve_output_dir(site_config, settings)}")


@app.command("config-hash")
def config_hash(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the site configuration TOML file.",
        callback=_resolve_config_path,
    ),
) -> None:
    """
    Output the deterministic hash of a config file for cache invalidation or change detection.
    """
    site_config = _load_config_or_exit(config)
    console.print(f"[bold green]{site_config.hash}[/]")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
