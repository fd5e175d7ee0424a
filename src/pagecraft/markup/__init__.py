from .attributes import VOID_ELEMENTS, attribute, boolean_attribute, build_attributes, render_tag
from .elements import (
    article,
    aside,
    element,
    footer,
    header,
    heading,
    image,
    link,
    list_item,
    main,
    navigation,
    script,
    section,
    stack,
    style,
    text,
    unordered_list,
)
from .node import Element, Fragment, Markup, Raw, Text, flatten_content

__all__ = [
    "VOID_ELEMENTS",
    "Element",
    "Fragment",
    "Markup",
    "Raw",
    "Text",
    "article",
    "aside",
    "attribute",
    "boolean_attribute",
    "build_attributes",
    "element",
    "flatten_content",
    "footer",
    "header",
    "heading",
    "image",
    "link",
    "list_item",
    "main",
    "navigation",
    "render_tag",
    "script",
    "section",
    "stack",
    "style",
    "text",
    "unordered_list",
]
