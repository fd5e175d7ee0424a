import logging
from pathlib import Path

import pytest
from filelock import FileLock, Timeout

from pagecraft.markup import text
from pagecraft.site import BuildError, Document, Layout, Metadata, Route, RobotsRule, SitemapEntry, Website
from pagecraft.util.filesystem import build_lock, lock_path_for


def _broken_content():
    raise RuntimeError("boom")


def _site(**overrides) -> Website:
    options = dict(
        metadata=Metadata(site="Acme"),
        routes=[
            Document(Metadata(title="Home"), text("home"), path=""),
            Document(Metadata(title="About"), text("about")),
            Document(Metadata(title="First Post"), text("post"), path="blog/first"),
        ],
        base_url="https://example.com",
    )
    options.update(overrides)
    return Website(**options)


def test_build_writes_one_file_per_route(tmp_path: Path) -> None:
    output = tmp_path / "out"

    report = _site().build(output)

    assert (output / "index.html").exists()
    assert (output / "about.html").exists()
    assert (output / "blog" / "first.html").exists()
    assert [page.name for page in report.pages] == ["index.html", "about.html", "first.html"]
    assert report.ok
    assert "<title>About | Acme</title>" in (output / "about.html").read_text(encoding="utf-8")
    assert not list(output.rglob("*.lock"))


def test_sitemap_and_robots_are_written_once_from_all_routes(tmp_path: Path) -> None:
    output = tmp_path / "out"

    report = _site().build(output, max_workers=1)

    sitemap = (output / "sitemap.xml").read_text(encoding="utf-8")
    assert report.sitemap is not None
    assert sitemap.count("<url>") == 3
    assert "<loc>https://example.com/</loc>" in sitemap
    assert "<loc>https://example.com/about.html</loc>" in sitemap
    assert "<loc>https://example.com/blog/first.html</loc>" in sitemap

    robots = (output / "robots.txt").read_text(encoding="utf-8")
    assert robots == "User-agent: *\nAllow: /\n\nSitemap: https://example.com/sitemap.xml\n"


def test_no_sitemap_without_base_url(tmp_path: Path) -> None:
    output = tmp_path / "out"

    report = _site(base_url=None).build(output)

    assert report.sitemap is None
    assert not (output / "sitemap.xml").exists()
    assert (output / "robots.txt").read_text(encoding="utf-8") == "User-agent: *\nAllow: /\n"


def test_layout_drives_sitemap_routes() -> None:
    layout = Layout(
        navigation=[Route(label="Docs", path="docs"), Route(label="GitHub", path="https://github.com/acme")],
        sitemap=[Route(label="Privacy", path="privacy"), Route(label="Docs again", path="/docs/")],
    )
    site = _site(layout=layout, sitemap_entries=[SitemapEntry(url="https://example.com/feed.xml")])

    sitemap = site.sitemap_xml()

    assert sitemap is not None
    assert sitemap.count("<loc>https://example.com/docs.html</loc>") == 1
    assert "<loc>https://example.com/privacy.html</loc>" in sitemap
    assert "<loc>https://example.com/feed.xml</loc>" in sitemap
    assert "github.com" not in sitemap


def test_build_clears_previous_output(tmp_path: Path) -> None:
    output = tmp_path / "out"
    output.mkdir()
    (output / "stale.html").write_text("old", encoding="utf-8")

    _site().build(output)

    assert not (output / "stale.html").exists()


def test_assets_are_copied_to_public(tmp_path: Path) -> None:
    assets = tmp_path / "assets"
    (assets / "css").mkdir(parents=True)
    (assets / "css" / "site.css").write_text("body {}", encoding="utf-8")
    output = tmp_path / "out"

    report = _site().build(output, assets_dir=assets)

    assert (output / "public" / "css" / "site.css").read_text(encoding="utf-8") == "body {}"
    assert report.assets is not None


def test_strict_build_raises_after_attempting_every_route(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    output = tmp_path / "out"
    site = _site()
    site.routes.append(Document(Metadata(title="Broken"), _broken_content))

    with caplog.at_level(logging.ERROR, logger="pagecraft.site.website"):
        with pytest.raises(BuildError) as exc:
            site.build(output)

    assert set(exc.value.failures) == {"broken.html"}
    assert "boom" in exc.value.failures["broken.html"]
    assert (output / "index.html").exists()
    assert (output / "blog" / "first.html").exists()
    assert not (output / "sitemap.xml").exists()
    assert not (output / "robots.txt").exists()
    assert "Failed to build broken.html" in caplog.text


def test_lenient_build_records_failures_and_writes_auxiliary_files(tmp_path: Path) -> None:
    output = tmp_path / "out"
    site = _site(robots_rules=[RobotsRule(disallow=["/drafts"])])
    site.routes.append(Document(Metadata(title="Broken"), _broken_content))

    report = site.build(output, strict=False)

    assert not report.ok
    assert list(report.failures) == ["broken.html"]
    assert len(report.pages) == 3
    assert (output / "sitemap.xml").exists()
    assert "Disallow: /drafts" in (output / "robots.txt").read_text(encoding="utf-8")


def test_duplicate_output_paths_are_reported(tmp_path: Path) -> None:
    site = _site()
    site.routes.append(Document(Metadata(title="About again"), text("dup"), path="about"))

    report = site.build(tmp_path / "out", strict=False)

    assert list(report.failures) == ["about.html#3"]
    assert "duplicate output path" in report.failures["about.html#3"]
    assert "about again" not in (tmp_path / "out" / "about.html").read_text(encoding="utf-8").lower()


def test_summary_rows(tmp_path: Path) -> None:
    report = _site().build(tmp_path / "out")

    rows = dict(report.summary_rows())

    assert rows["Pages"] == "3"
    assert rows["Failures"] == "0"
    assert rows["Sitemap"].endswith("sitemap.xml")


def test_build_waits_for_lock_held_on_output(tmp_path: Path) -> None:
    output = tmp_path / "out"

    with FileLock(str(lock_path_for(output))):
        with pytest.raises(Timeout):
            with build_lock(output, timeout=0.1):
                pass

    report = _site().build(output)
    assert report.ok
    assert not (output / lock_path_for(output).name).exists()


def test_missing_assets_directory_is_skipped(tmp_path: Path) -> None:
    report = _site().build(tmp_path / "out", assets_dir=tmp_path / "missing")

    assert report.assets is None
    assert not (tmp_path / "out" / "public").exists()


def test_parent_segments_stay_inside_output(tmp_path: Path) -> None:
    output = tmp_path / "out"
    site = Website(
        routes=[
            Document(Metadata(title="x"), "hi", path="../escaped"),
            Document(Metadata(title="y"), "hi", path="./a/../b"),
        ]
    )

    report = site.build(output)

    assert report.ok
    assert (output / "escaped.html").exists()
    assert (output / "a" / "b.html").exists()
    assert not (tmp_path / "escaped.html").exists()


def test_extra_files_are_written_inside_the_build(tmp_path: Path) -> None:
    output = tmp_path / "out"
    site = _site(files={"favicon.svg": "<svg/>", "../.well-known/security.txt": "Contact: me"})

    report = site.build(output)

    assert (output / "favicon.svg").read_text(encoding="utf-8") == "<svg/>"
    assert (output / ".well-known" / "security.txt").exists()
    assert not (tmp_path / ".well-known").exists()
    assert dict(report.summary_rows())["Files"] == "favicon.svg, security.txt"
