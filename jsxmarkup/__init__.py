"""Build element trees and serialize them to markup."""

from .builder import DANGEROUS_INNER_HTML, CustomElementHandler, create_element, h
from .escaping import escape_attr_value, escape_text
from .flatten import flatten_contents
from .naming import to_kebab_case
from .nodes import VOID_ELEMENTS, ContentType, ElementNode, RenderNode, TextNode

__all__ = [
    "ContentType",
    "CustomElementHandler",
    "DANGEROUS_INNER_HTML",
    "ElementNode",
    "RenderNode",
    "TextNode",
    "VOID_ELEMENTS",
    "create_element",
    "escape_attr_value",
    "escape_text",
    "flatten_contents",
    "h",
    "to_kebab_case",
]
