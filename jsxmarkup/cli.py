"""Command-line interface for jsxmarkup."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from .io_utils import read_payload
from .models import import_object, load_tree_document, parse_tree_document
from .naming import to_kebab_case


def _parse_component_args(values: Optional[List[str]]) -> Dict[str, Any]:
    registry: Dict[str, Any] = {}
    for value in values or []:
        name, sep, path = value.partition("=")
        if not sep or not name:
            raise SystemExit(f"--component expects NAME=module:attribute, got '{value}'")
        try:
            registry[name] = import_object(path)
        except (ImportError, AttributeError, ValueError) as exc:
            raise SystemExit(f"Cannot load component '{name}' from '{path}': {exc}") from exc
    return registry


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    registry = _parse_component_args(args.components)

    document = load_tree_document(input_path)
    try:
        markup = str(document.to_node(registry))
    except (KeyError, ImportError, AttributeError, ValueError) as exc:
        raise SystemExit(f"Cannot render {input_path}: {exc}") from exc

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markup + "\n", encoding="utf-8")
        print(f"Rendered {input_path} to {output_path}.")
    else:
        sys.stdout.write(markup + "\n")


def _handle_validate(args: argparse.Namespace) -> None:
    errors: list[str] = []
    validated = 0
    for raw_path in args.inputs:
        path = Path(raw_path)
        if not path.exists():
            errors.append(f"{path}: file not found")
            continue
        try:
            parse_tree_document(read_payload(path))
        except (json.JSONDecodeError, yaml.YAMLError, ValidationError) as exc:
            errors.append(f"{path}: {exc}")
            continue
        validated += 1

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        raise SystemExit(1)

    print(f"Validated {validated} tree file(s).")


def _handle_kebab(args: argparse.Namespace) -> None:
    for name in args.names:
        print(to_kebab_case(name))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsxmarkup",
        description="Render declarative element trees to markup.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="jsxmarkup 0.1.0",
        help="Show the jsxmarkup version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML or JSON tree file.",
        description="Validate a tree document and write its markup.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the tree file (.yaml, .yml or .json).",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the markup (default: stdout).",
    )
    render_parser.add_argument(
        "--component",
        action="append",
        dest="components",
        metavar="NAME=MODULE:ATTR",
        help="Register a component handler (repeatable); overrides the file's components.",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate tree files without rendering.",
        description="Check that tree files match the document schema.",
    )
    validate_parser.add_argument("inputs", nargs="+", help="Tree files to validate.")
    validate_parser.set_defaults(func=_handle_validate)

    kebab_parser = subparsers.add_parser(
        "kebab",
        help="Print the markup name for identifiers.",
        description="Convert camelCase identifiers to kebab-case markup names.",
    )
    kebab_parser.add_argument("names", nargs="+", help="Identifiers to convert.")
    kebab_parser.set_defaults(func=_handle_kebab)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
