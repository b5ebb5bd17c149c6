"""Construction entry point for element trees."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .flatten import flatten_contents
from .naming import to_kebab_case
from .nodes import Attributes, ContentType, ElementNode, RenderNode, TextNode

DANGEROUS_INNER_HTML = "dangerousInnerHtml"


class CustomElementHandler(Protocol):
    def __call__(
        self, attributes: Optional[Attributes], contents: List[ContentType]
    ) -> RenderNode: ...


def create_element(name: Any, attributes: Optional[Attributes] = None, *children: Any) -> Any:
    """Build a node for ``name`` with the given attributes and children.

    ``name`` is either a tag name, kebab-cased into the element's tag, or a
    handler called as ``name(attributes, flattened_children)`` whose result
    is returned unchanged.

    A truthy ``dangerousInnerHtml`` attribute replaces all children with its
    value, inserted without escaping, and is removed from ``attributes``.
    """

    contents: tuple = children
    if attributes and attributes.get(DANGEROUS_INNER_HTML):
        # Raw markup insertion assumes the value is trusted.
        contents = (TextNode(str(attributes[DANGEROUS_INNER_HTML])),)
        del attributes[DANGEROUS_INNER_HTML]

    if callable(name):
        return name(attributes, flatten_contents(contents))

    return ElementNode(
        tag_name=to_kebab_case(str(name)),
        attributes=attributes,
        children=tuple(flatten_contents(contents)),
    )


h = create_element


__all__ = ["CustomElementHandler", "DANGEROUS_INNER_HTML", "create_element", "h"]
