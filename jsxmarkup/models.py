"""Pydantic models for declarative element trees stored as YAML or JSON."""

import importlib
import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import yaml
from markdown import markdown
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .builder import create_element
from .io_utils import read_payload, warn
from .naming import to_kebab_case
from .nodes import TextNode, is_void_element

AttributeScalar = Union[bool, int, float, datetime, date, str]
ComponentResolver = Callable[[str], Any]


def import_object(path: str) -> Any:
    """Import ``module:attribute`` and return the attribute."""

    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Component path must look like 'module:attribute', got {path!r}")
    target: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        target = getattr(target, part)
    return target


class MarkdownSpec(BaseModel):
    """Child rendered from Markdown source and inserted without escaping."""

    markdown: str = Field(..., description="Markdown source text.")

    model_config = ConfigDict(extra="forbid")

    def to_node(self) -> TextNode:
        return TextNode(markdown(self.markdown))


class ElementSpec(BaseModel):
    """Element or component invocation inside a tree document."""

    tag: Optional[str] = Field(None, description="Tag name, kebab-cased on build.")
    component: Optional[str] = Field(
        None, description="Name of a registered or importable component handler."
    )
    attributes: Dict[str, Optional[AttributeScalar]] = Field(
        default_factory=dict,
        description="Attributes in declaration order; booleans toggle presence.",
    )
    children: List["ChildSpec"] = Field(
        default_factory=list, description="Nested elements, Markdown blocks or text."
    )

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _require_single_target(self) -> "ElementSpec":
        if (self.tag is None) == (self.component is None):
            raise ValueError("exactly one of 'tag' or 'component' must be set")
        return self

    def to_node(self, resolve: ComponentResolver) -> Any:
        if self.component is not None:
            name: Any = resolve(self.component)
        else:
            name = self.tag
            if self.children and is_void_element(to_kebab_case(self.tag)):
                warn(f"[tree] children of void element <{to_kebab_case(self.tag)}> are not rendered")

        children = [_child_to_content(child, resolve) for child in self.children]
        return create_element(name, dict(self.attributes) or None, *children)


ChildSpec = Union[ElementSpec, MarkdownSpec, bool, int, float, str]

ElementSpec.model_rebuild()


def _child_to_content(child: ChildSpec, resolve: ComponentResolver) -> Any:
    if isinstance(child, ElementSpec):
        return child.to_node(resolve)
    if isinstance(child, MarkdownSpec):
        return child.to_node()
    return child


class TreeDocument(BaseModel):
    """Top-level tree file: a root element plus component import paths."""

    components: Dict[str, str] = Field(
        default_factory=dict,
        description="Map of component name to 'module:attribute' import path.",
    )
    root: ElementSpec = Field(..., description="Root element of the document.")

    model_config = ConfigDict(extra="forbid")

    def resolve_component(
        self, name: str, registry: Optional[Mapping[str, Any]] = None
    ) -> Any:
        if registry and name in registry:
            return registry[name]
        if name in self.components:
            return import_object(self.components[name])
        raise KeyError(f"Unknown component '{name}'")

    def to_node(self, registry: Optional[Mapping[str, Any]] = None) -> Any:
        """Build the node tree, preferring ``registry`` over import paths."""

        return self.root.to_node(lambda name: self.resolve_component(name, registry))


def parse_tree_document(payload: Any) -> TreeDocument:
    # A bare element mapping is accepted as the root.
    if isinstance(payload, dict) and "root" not in payload:
        payload = {"root": payload}
    return TreeDocument.model_validate(payload)


def load_tree_document(path: Path) -> TreeDocument:
    """Load and validate a tree document from a YAML or JSON file."""

    if not path.exists():
        raise FileNotFoundError(f"Tree file not found: {path}")

    try:
        return parse_tree_document(read_payload(path))
    except (json.JSONDecodeError, yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid tree file {path}: {exc}") from exc


__all__ = [
    "AttributeScalar",
    "ChildSpec",
    "ElementSpec",
    "MarkdownSpec",
    "TreeDocument",
    "import_object",
    "load_tree_document",
    "parse_tree_document",
]
