"""Normalization of nested child contents."""

from __future__ import annotations

from typing import Any, Iterable, List

from .escaping import escape_text
from .nodes import ContentType, ElementNode, TextNode


def flatten_contents(contents: Iterable[Any]) -> List[ContentType]:
    """Flatten nested lists/tuples of children depth-first.

    Nodes are kept by reference, every other value is stringified and
    text-escaped. The input is never modified.
    """

    results: List[ContentType] = []
    for content in contents:
        if isinstance(content, (TextNode, ElementNode)):
            results.append(content)
        elif isinstance(content, (list, tuple)):
            results.extend(flatten_contents(content))
        else:
            results.append(escape_text(str(content)))
    return results


__all__ = ["flatten_contents"]
