import pytest

from pagecraft.markup import article, section, stack, text
from pagecraft.site import Document, Favicon, FooterVariant, HeaderVariant, Layout, Metadata, Route, ThemeColor
from pagecraft.styles import Theme


def test_page_title_uses_separator_only_when_both_parts_exist() -> None:
    assert Metadata(title="About", site="Acme").page_title == "About | Acme"
    assert Metadata(title="About", site="Acme", title_separator=" - ").page_title == "About - Acme"
    assert Metadata(site="Acme").page_title == "Acme"
    assert Metadata(title="About").page_title == "About"
    assert Metadata().page_title == ""


def test_page_values_take_precedence_over_site_defaults() -> None:
    site = Metadata(site="Acme", description="Site description", locale="fr", author="Team")
    page = Metadata(title="About", description="Page description")

    merged = page.merged(site)

    assert merged.title == "About"
    assert merged.site == "Acme"
    assert merged.description == "Page description"
    assert merged.locale == "fr"
    assert merged.author == "Team"


def test_document_skeleton() -> None:
    html = Document(Metadata(title="About"), text("Hi")).render(Metadata(site="Acme"))

    assert html.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
    assert "<title>About | Acme</title>" in html
    assert '<meta property="og:title" content="About | Acme">' in html
    assert '<meta name="generator" content="pagecraft">' in html
    assert "https://unpkg.com/@tailwindcss/browser@4" in html
    assert "<body><p>Hi</p></body>" in html
    assert html.endswith("</html>")


def test_page_locale_overrides_site_locale() -> None:
    site = Metadata(site="Acme", locale="fr")

    assert '<html lang="fr">' in Document(Metadata(title="A"), "x").render(site)
    assert '<html lang="de">' in Document(Metadata(title="A", locale="de"), "x").render(site)


def test_title_is_escaped() -> None:
    html = Document(Metadata(title="A & B")).render()

    assert "<title>A &amp; B</title>" in html


def test_head_tags_from_metadata() -> None:
    metadata = Metadata(
        title="Home",
        description="Welcome",
        author="Jo",
        twitter="@acme",
        keywords=["static", "html"],
        theme_color=ThemeColor(light="#ffffff", dark="#000000"),
        favicons=[Favicon(light="/icon.png", size="32x32")],
    )

    tags = metadata.tags()

    assert '<meta name="description" content="Welcome">' in tags
    assert '<meta property="og:description" content="Welcome">' in tags
    assert '<meta name="author" content="Jo">' in tags
    assert '<meta name="twitter:creator" content="@acme">' in tags
    assert '<meta name="keywords" content="static, html">' in tags
    assert '<meta name="theme-color" content="#ffffff" media="(prefers-color-scheme: light)">' in tags
    assert '<meta name="theme-color" content="#000000" media="(prefers-color-scheme: dark)">' in tags
    assert '<link rel="icon" type="image/png" href="/icon.png" sizes="32x32">' in tags
    assert '<link rel="apple-touch-icon" sizes="32x32" href="/icon.png">' in tags


def test_dark_favicon_variant() -> None:
    tags = Favicon(light="/light.svg", dark="/dark.svg").tags()

    assert tags == [
        '<link rel="icon" type="image/svg+xml" href="/light.svg" media="(prefers-color-scheme: light)">',
        '<link rel="icon" type="image/svg+xml" href="/dark.svg" media="(prefers-color-scheme: dark)">',
    ]


def test_assets_theme_and_tailwind_toggle() -> None:
    document = Document(
        Metadata(title="A"),
        "x",
        stylesheets=["/page.css"],
        scripts={"/page.js": "defer"},
        head='<link rel="preconnect" href="https://fonts.example">',
    )

    html = document.render(
        stylesheets=["/site.css"],
        theme=Theme(breakpoints={"md": "50rem"}),
        tailwind=False,
    )

    assert '<link rel="stylesheet" href="/site.css">\n<link rel="stylesheet" href="/page.css">' in html
    assert '<script defer src="/page.js"></script>' in html
    assert '<style type="text/tailwindcss">@theme {' in html
    assert '<link rel="preconnect" href="https://fonts.example">' in html
    assert "tailwindcss/browser" not in html


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        (Document(Metadata(title="Hello World")), "hello-world.html"),
        (Document(path="/blog/first/"), "blog/first.html"),
        (Document(path="index.html"), "index.html"),
        (Document(Metadata(title="Home"), path=""), "index.html"),
        (Document(), "index.html"),
    ],
)
def test_output_name(document: Document, expected: str) -> None:
    assert document.output_name == expected


def test_layout_wraps_body_with_header_and_footer() -> None:
    layout = Layout(
        navigation=[
            Route(label="Docs", path="docs"),
            Route(label="GitHub", path="https://github.com/acme", new_tab=True),
        ],
        footer=FooterVariant.MINIMAL,
    )

    html = Document(Metadata(title="Home"), stack("content", id="page")).render(
        Metadata(site="Acme"), layout=layout
    )

    assert html.index("<header") < html.index('<div id="page">content</div>') < html.index("<footer")
    assert '<a href="/docs">Docs</a>' in html
    assert '<a href="https://github.com/acme" target="_blank" rel="noopener">GitHub</a>' in html
    assert "footer-minimal" in html


def test_hidden_layout_parts_render_nothing() -> None:
    layout = Layout(header=HeaderVariant.HIDDEN, footer=FooterVariant.HIDDEN)

    html = Document(Metadata(title="Home"), "body").render(layout=layout)

    assert "<header" not in html
    assert "<footer" not in html
    assert "<body>body</body>" in html


def test_document_content_is_rendered_lazily() -> None:
    posts = []
    document = Document(Metadata(title="Posts"), lambda: text(f"{len(posts)} posts"))
    posts.extend(["a", "b"])

    assert "<p>2 posts</p>" in document.render()


def test_page_title_falls_back_to_site_title() -> None:
    html = Document(Metadata(title="Hello, world!"), text("hi")).render(Metadata(site="Great Site"))

    assert "<title>Hello, world! | Great Site</title>" in html


def test_nested_sections_render_without_whitespace() -> None:
    body = article(
        section(text("one"), text("two")),
        section(text("three"), text("four")),
    )

    html = Document(Metadata(title="Home"), body, path="").render(tailwind=False)

    assert html.startswith("<!DOCTYPE html>")
    assert (
        "<body><article><section><p>one</p><p>two</p></section>"
        "<section><p>three</p><p>four</p></section></article></body>"
    ) in html
