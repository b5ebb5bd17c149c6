"""Jinja2 integration for element trees."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .builder import create_element
from .naming import to_kebab_case


def template_env(
    template_dirs: Optional[Iterable[Path]] = None,
    *,
    components: Optional[Mapping[str, Any]] = None,
) -> Environment:
    """Create a Jinja environment that can build elements inline.

    ``h``/``create_element`` and every entry of ``components`` are exposed as
    globals. Nodes are markup-safe, so ``{{ node }}`` is not escaped again.
    """

    loader = FileSystemLoader([Path(path) for path in template_dirs]) if template_dirs else None
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "jinja"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.globals["h"] = create_element
    env.globals["create_element"] = create_element
    env.globals.update(components or {})
    env.filters["kebab"] = to_kebab_case
    return env


def render_string(source: str, env: Optional[Environment] = None, **context: Any) -> str:
    env = env or template_env()
    return env.from_string(source).render(**context)


__all__ = ["render_string", "template_env"]
