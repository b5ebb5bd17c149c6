"""Identifier to markup-name conversion."""

from __future__ import annotations


def is_upper(value: str, index: int) -> bool:
    """Return True when the character at ``index`` is an ASCII capital."""

    return "A" <= value[index] <= "Z"


def to_kebab_case(camel_cased: str) -> str:
    """Convert a camelCase identifier into a hyphenated markup name.

    A capital letter is lowercased and prefixed with ``-`` when it follows a
    non-capital or precedes one. Both ends of the string count as capitals, so
    an all-caps run such as ``ID`` is copied unchanged while ``dataFoo``
    becomes ``data-foo``.
    """

    parts: list[str] = []
    last = len(camel_cased) - 1
    for i, char in enumerate(camel_cased):
        prev_upper = is_upper(camel_cased, i - 1) if i > 0 else True
        current_upper = is_upper(camel_cased, i)
        next_upper = is_upper(camel_cased, i + 1) if i < last else True
        if (current_upper and not prev_upper) or (current_upper and not next_upper):
            parts.append("-")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


__all__ = ["is_upper", "to_kebab_case"]
