import pytest
from pydantic import ValidationError

from pagecraft.site import ChangeFrequency, Route, RobotsRule, SitemapEntry, entries_for_routes, render_robots, render_sitemap
from pagecraft.site.sitemap import change_frequency_for, location, priority_for


def test_default_robots_allows_everything() -> None:
    assert render_robots() == "User-agent: *\nAllow: /\n"


def test_robots_blocks_and_sitemap_line() -> None:
    rules = [
        RobotsRule(user_agent="Googlebot", disallow=["/private"], allow=["/"], crawl_delay=10),
        RobotsRule(user_agent="*", disallow=["/tmp"]),
    ]

    body = render_robots(rules, sitemap_url="https://example.com/sitemap.xml")

    assert body == (
        "User-agent: Googlebot\n"
        "Disallow: /private\n"
        "Allow: /\n"
        "Crawl-delay: 10\n"
        "\n"
        "User-agent: *\n"
        "Disallow: /tmp\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )


def test_negative_crawl_delay_is_rejected() -> None:
    with pytest.raises(ValidationError):
        RobotsRule(crawl_delay=-1)


def test_priority_and_frequency_by_depth() -> None:
    assert priority_for("") == 1.0
    assert priority_for("about") == 0.9
    assert priority_for("a/b/c/d/e/f") == 0.5
    assert change_frequency_for("") is ChangeFrequency.WEEKLY
    assert change_frequency_for("about") is ChangeFrequency.MONTHLY
    assert change_frequency_for("blog/first") is ChangeFrequency.YEARLY


def test_locations() -> None:
    assert location("https://example.com/", "") == "https://example.com/"
    assert location("https://example.com", "blog/first") == "https://example.com/blog/first.html"


def test_entries_skip_external_and_deduplicate() -> None:
    routes = [
        Route(label="Docs", path="docs"),
        Route(label="GitHub", path="https://github.com/acme"),
        Route(label="Docs again", path="/docs/"),
    ]
    extra = [
        SitemapEntry(url="https://example.com/docs.html", priority=0.1),
        SitemapEntry(url="https://example.com/feed.xml", priority=0.3),
    ]

    entries = entries_for_routes("https://example.com", routes, extra)

    assert [entry.url for entry in entries] == ["https://example.com/docs.html", "https://example.com/feed.xml"]
    assert entries[0].priority == 0.9


def test_priority_is_clamped() -> None:
    assert SitemapEntry(url="https://example.com/", priority=2.0).priority == 1.0


def test_render_sitemap() -> None:
    xml = render_sitemap(
        [SitemapEntry(url="https://example.com/?a=1&b=2", change_frequency=ChangeFrequency.DAILY, priority=0.8)]
    )

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')
    assert "<loc>https://example.com/?a=1&amp;b=2</loc>" in xml
    assert "<changefreq>daily</changefreq>" in xml
    assert "<priority>0.8</priority>" in xml
    assert xml.endswith("</urlset>\n")
