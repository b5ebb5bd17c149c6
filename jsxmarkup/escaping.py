"""Escaping policies for attribute values and text content."""

from __future__ import annotations

import re

_ATTR_PATTERN = re.compile("[&\"\u00a0]")
_ATTR_REPLACEMENTS = {
    "&": "&amp;",
    '"': "&quot;",
    "\u00a0": "&nbsp;",
}


def escape_attr_value(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""

    return _ATTR_PATTERN.sub(lambda match: _ATTR_REPLACEMENTS[match.group(0)], value)


def escape_text(value: str) -> str:
    # "&" goes first so the entities added below are not escaped twice.
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


__all__ = ["escape_attr_value", "escape_text"]
