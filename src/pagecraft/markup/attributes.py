"""
Deterministic construction of HTML start tags.

Attribute order is fixed: ``id``, ``class``, ``role``, ``aria-label``, the
``data-*`` entries in insertion order, then any additional attributes in the
order supplied. Absent or empty values are omitted entirely, so the builder
never emits ``class=""`` or ``id=""``.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Union

from ..util import escape_html

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

AttributeValue = Union[str, int, float, bool, None]
AdditionalAttributes = Union[Mapping[str, AttributeValue], Iterable[str], None]


def attribute(name: str, value: AttributeValue) -> Optional[str]:
    """
    Build ``name="value"`` or return None when the value is absent or empty.
    """
    if value is None or value is False:
        return None
    if value is True:
        return name
    text = str(value)
    if not text:
        return None
    return f'{name}="{escape_html(text)}"'


def boolean_attribute(name: str, enabled: Optional[bool]) -> Optional[str]:
    """Return the bare attribute name when enabled, otherwise None."""
    return name if enabled else None


def _additional(additional: AdditionalAttributes) -> List[str]:
    if not additional:
        return []
    if isinstance(additional, Mapping):
        rendered = (attribute(name, value) for name, value in additional.items())
        return [item for item in rendered if item]
    return [item for item in additional if item]


def build_attributes(
    id: Optional[str] = None,
    classes: Optional[Iterable[str]] = None,
    role: Optional[str] = None,
    label: Optional[str] = None,
    data: Optional[Mapping[str, str]] = None,
    additional: AdditionalAttributes = None,
) -> List[str]:
    """
    Collect the attribute strings for a start tag.

    Args:
        id: Unique element identifier.
        classes: Class tokens, space-joined in insertion order.
        role: ARIA role.
        label: ARIA label.
        data: ``data-*`` pairs; keys are given without the ``data-`` prefix.
        additional: Extra attributes, as rendered strings or a name/value mapping.

    Returns:
        Attribute strings in the canonical order.
    """
    attributes: List[str] = []

    id_attr = attribute("id", id)
    if id_attr:
        attributes.append(id_attr)

    class_tokens = [token for token in (classes or ()) if token]
    if class_tokens:
        attributes.append(f'class="{escape_html(" ".join(class_tokens))}"')

    role_attr = attribute("role", getattr(role, "value", role))
    if role_attr:
        attributes.append(role_attr)

    label_attr = attribute("aria-label", label)
    if label_attr:
        attributes.append(label_attr)

    for key, value in (data or {}).items():
        data_attr = attribute(f"data-{key}", value)
        if data_attr:
            attributes.append(data_attr)

    attributes.extend(_additional(additional))
    return attributes


def render_tag(tag: str, attributes: Iterable[str] = (), content: Optional[str] = None) -> str:
    """
    Render a complete tag.

    Void elements render as a lone start tag and ignore content; every other
    tag renders an open/close pair, with an empty body when content is None.
    """
    rendered = " ".join(item for item in attributes if item)
    attribute_string = f" {rendered}" if rendered else ""
    if tag.lower() in VOID_ELEMENTS:
        return f"<{tag}{attribute_string}>"
    return f"<{tag}{attribute_string}>{content or ''}</{tag}>"
