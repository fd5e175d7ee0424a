"""
Markup nodes.

Nodes are immutable values: styling and class changes return new nodes.
Element content is held as a zero-argument callable and only evaluated by
:meth:`Markup.render`, so closures see values that were finalized after the
tree was built.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Number
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..styles.modifiers import Modifiers, merge_classes
from ..styles.operation import Modification, StyleOperation
from ..styles.responsive import Configure, collect
from ..styles.stylable import Stylable
from ..util.text import escape_html
from .attributes import attribute, build_attributes, render_tag

Content = Any
ContentProducer = Callable[[], Content]


def _no_content() -> Content:
    return ()


def flatten_content(content: Content) -> Iterator["Markup"]:
    """
    Walk produced content in order, yielding nodes.

    Strings and numbers become escaped text, ``None`` and booleans are
    skipped, callables are invoked and iterables are flattened.
    """
    if content is None or isinstance(content, bool):
        return
    if isinstance(content, Markup):
        yield content
    elif isinstance(content, str):
        yield Text(content)
    elif isinstance(content, Number):
        yield Text(str(content))
    elif callable(content):
        yield from flatten_content(content())
    elif isinstance(content, Iterable):
        for item in content:
            yield from flatten_content(item)
    else:
        yield Text(str(content))


def as_producer(children: Tuple[Content, ...] = (), content: Optional[Content] = None) -> ContentProducer:
    """Combine positional children and an optional ``content`` closure into one producer."""
    if not children and content is None:
        return _no_content
    if not children and callable(content) and not isinstance(content, Markup):
        return content

    def produce() -> Content:
        return (children, content)

    return produce


class Markup(Stylable):
    """Base of every renderable node."""

    def render(self) -> str:
        raise NotImplementedError

    def adding_classes(self, classes: Iterable[str]) -> "Markup":
        """Return a copy with ``classes`` appended (duplicates dropped)."""
        raise NotImplementedError

    def _apply_style(self, operation: StyleOperation, params: Any, on: Modifiers) -> "Markup":
        return operation.apply_to(self, params, on)

    def on(self, *modifications: Modification) -> "Markup":
        """Apply declarative modifications, e.g. ``node.on(md(font(...)))``."""
        classes: List[str] = []
        for modification in modifications:
            classes.extend(modification.class_names())
        return self.adding_classes(classes)

    def responsive(self, configure: Configure) -> "Markup":
        return self.adding_classes(collect(configure))

    def __str__(self) -> str:
        return self.render()


class _Inline(Markup):
    """Tag-less node; classes wrap it in a ``<span>``."""

    def adding_classes(self, classes: Iterable[str]) -> Markup:
        merged = merge_classes((), classes)
        if not merged:
            return self
        return Element("span", classes=merged, content=lambda: self)


@dataclass(frozen=True)
class Text(_Inline):
    value: str

    def render(self) -> str:
        return escape_html(self.value)


@dataclass(frozen=True)
class Raw(_Inline):
    """Trusted markup emitted verbatim."""
    html: str

    def render(self) -> str:
        return self.html


@dataclass(frozen=True)
class Fragment(_Inline):
    content: ContentProducer = _no_content

    @classmethod
    def of(cls, *children: Content) -> "Fragment":
        return cls(as_producer(children))

    def children(self) -> List[Markup]:
        return list(flatten_content(self.content))

    def render(self) -> str:
        return "".join(child.render() for child in self.children())


@dataclass(frozen=True)
class Element(Markup):
    """
    A tag with its identity attributes, accumulated classes and lazy content.

    Attributes:
        tag: HTML tag name.
        id: Optional ``id`` attribute.
        classes: Class tokens in insertion order, without duplicates.
        role: ARIA role.
        label: ``aria-label`` value.
        data: ``data-*`` pairs in insertion order.
        attributes: Pre-rendered extra attributes, emitted last.
        content: Zero-argument producer, evaluated on render.
    """
    tag: str
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    role: Optional[str] = None
    label: Optional[str] = None
    data: Tuple[Tuple[str, str], ...] = ()
    attributes: Tuple[str, ...] = ()
    content: ContentProducer = _no_content

    def __post_init__(self) -> None:
        classes = self.classes.split() if isinstance(self.classes, str) else (self.classes or ())
        object.__setattr__(self, "classes", merge_classes((), classes))
        if isinstance(self.data, Mapping):
            object.__setattr__(self, "data", tuple(self.data.items()))

    def adding_classes(self, classes: Iterable[str]) -> "Element":
        merged = merge_classes(self.classes, classes)
        if merged == self.classes:
            return self
        return replace(self, classes=merged)

    def with_attributes(self, *rendered: Optional[str], **values: Any) -> "Element":
        """
        Copy with extra attributes appended.

        Positional values are pre-rendered (``'target="_blank"'``); keyword
        values go through :func:`attribute`, with underscores turned into dashes.
        """
        extra = [item for item in rendered if item]
        for name, value in values.items():
            item = attribute(name.rstrip("_").replace("_", "-"), value)
            if item:
                extra.append(item)
        if not extra:
            return self
        return replace(self, attributes=self.attributes + tuple(extra))

    def children(self) -> List[Markup]:
        return list(flatten_content(self.content))

    def render(self) -> str:
        attributes = build_attributes(
            id=self.id,
            classes=self.classes,
            role=self.role,
            label=self.label,
            data=dict(self.data),
            additional=self.attributes,
        )
        inner = "".join(child.render() for child in self.children())
        return render_tag(self.tag, attributes, inner)


MarkupLike = Union[Markup, str, None]
