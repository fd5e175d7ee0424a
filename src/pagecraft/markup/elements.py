"""
A small structural element catalog.

Every factory takes positional children and/or a ``content`` closure plus
the identity attributes shared by all elements::

    stack(
        heading(1, "Welcome"),
        text(lambda: f"{len(posts)} posts"),
        classes=["container"],
    )
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Union

from .attributes import attribute, boolean_attribute
from .node import Content, Element, Raw, as_producer

Classes = Union[str, Iterable[str], None]


def element(
    tag: str,
    *children: Content,
    content: Optional[Content] = None,
    id: Optional[str] = None,
    classes: Classes = None,
    role: Optional[str] = None,
    label: Optional[str] = None,
    data: Optional[Mapping[str, str]] = None,
    attributes: Optional[Mapping[str, Any]] = None,
) -> Element:
    rendered = [attribute(name, value) for name, value in (attributes or {}).items()]
    return Element(
        tag,
        id=id,
        classes=tuple(classes.split()) if isinstance(classes, str) else tuple(classes or ()),
        role=getattr(role, "value", role),
        label=label,
        data=tuple((data or {}).items()),
        attributes=tuple(item for item in rendered if item),
        content=as_producer(children, content),
    )


def stack(*children: Content, **options: Any) -> Element:
    """Generic block container (``<div>``)."""
    return element("div", *children, **options)


def article(*children: Content, **options: Any) -> Element:
    return element("article", *children, **options)


def section(*children: Content, **options: Any) -> Element:
    return element("section", *children, **options)


def header(*children: Content, **options: Any) -> Element:
    return element("header", *children, **options)


def footer(*children: Content, **options: Any) -> Element:
    return element("footer", *children, **options)


def navigation(*children: Content, **options: Any) -> Element:
    return element("nav", *children, **options)


def main(*children: Content, **options: Any) -> Element:
    return element("main", *children, **options)


def aside(*children: Content, **options: Any) -> Element:
    return element("aside", *children, **options)


def text(*children: Content, tag: str = "p", **options: Any) -> Element:
    """Paragraph text; pass ``tag="span"`` for inline runs."""
    return element(tag, *children, **options)


def heading(level: int, *children: Content, **options: Any) -> Element:
    level = min(6, max(1, int(level)))
    return element(f"h{level}", *children, **options)


def link(*children: Content, href: str, new_tab: bool = False, **options: Any) -> Element:
    node = element("a", *children, **options).with_attributes(attribute("href", href))
    if new_tab:
        node = node.with_attributes(attribute("target", "_blank"), attribute("rel", "noopener"))
    return node


def unordered_list(*children: Content, **options: Any) -> Element:
    return element("ul", *children, **options)


def list_item(*children: Content, **options: Any) -> Element:
    return element("li", *children, **options)


def image(source: str, description: str, *, width: Optional[int] = None, height: Optional[int] = None,
          lazy: bool = False, **options: Any) -> Element:
    node = element("img", **options).with_attributes(
        attribute("src", source),
        attribute("alt", description),
        attribute("width", width),
        attribute("height", height),
    )
    if lazy:
        node = node.with_attributes(attribute("loading", "lazy"))
    return node


def script(source: Optional[str] = None, inline: Optional[str] = None, *, defer: bool = False,
           module: bool = False, **options: Any) -> Element:
    """External (``source``) or inline script; inline code is emitted unescaped."""
    node = element("script", Raw(inline) if inline else None, **options)
    return node.with_attributes(
        attribute("type", "module" if module else None),
        attribute("src", source),
        boolean_attribute("defer", defer),
    )


def style(css: str, *, type: Optional[str] = None, **options: Any) -> Element:
    node = element("style", Raw(css), **options)
    return node.with_attributes(attribute("type", type))
