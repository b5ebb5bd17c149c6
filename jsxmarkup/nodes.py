"""Immutable node model and markup serialization."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Mapping, Optional, Tuple, Union

from .escaping import escape_attr_value
from .naming import to_kebab_case

AttributeValue = Union[int, float, str, date, bool, None]
Attributes = Dict[str, AttributeValue]

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_void_element(tag_name: str) -> bool:
    return tag_name in VOID_ELEMENTS


def attribute_to_string(name: str, value: AttributeValue) -> str:
    """Render a single attribute, or ``""`` when it should be omitted."""

    formatted_name = to_kebab_case(name)
    if isinstance(value, bool):
        # Boolean attributes are present or absent, never valued.
        return formatted_name if value else ""
    if isinstance(value, date):
        return f'{formatted_name}="{escape_attr_value(value.isoformat())}"'
    text = "" if value is None else str(value)
    return f'{formatted_name}="{escape_attr_value(text)}"'


def attributes_to_string(attributes: Optional[Mapping[str, AttributeValue]]) -> str:
    if not attributes:
        return ""
    rendered = [attribute_to_string(name, value) for name, value in attributes.items()]
    # Omitted false booleans must not leave a dangling separator.
    joined = " ".join(part for part in rendered if part)
    return " " + joined if joined else ""


class RenderMixin:
    """Shared string protocol for nodes.

    ``__html__`` lets MarkupSafe and Jinja2 autoescaping treat a node as
    already-rendered markup.
    """

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class TextNode(RenderMixin):
    """Leaf holding render-ready text that is emitted verbatim."""

    contents: str

    def render(self) -> str:
        return self.contents


@dataclass(frozen=True)
class ElementNode(RenderMixin):
    """A named element with attributes and ordered children."""

    tag_name: str
    attributes: Optional[Attributes]
    children: Tuple["ContentType", ...] = ()

    @property
    def is_void(self) -> bool:
        return is_void_element(self.tag_name)

    def render(self) -> str:
        attrs = attributes_to_string(self.attributes)
        if self.is_void:
            # Void tags never close, so any children are dropped from output.
            return f"<{self.tag_name}{attrs}>"
        contents = "".join(str(child) for child in self.children)
        return f"<{self.tag_name}{attrs}>{contents}</{self.tag_name}>"


RenderNode = Union[TextNode, ElementNode]
ContentType = Union[TextNode, ElementNode, str]


__all__ = [
    "AttributeValue",
    "Attributes",
    "ContentType",
    "ElementNode",
    "RenderMixin",
    "RenderNode",
    "TextNode",
    "VOID_ELEMENTS",
    "attribute_to_string",
    "attributes_to_string",
    "is_void_element",
]
