"""Utility helpers for reading tree files and reporting problems."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def read_payload(path: Path) -> Any:
    """Load a JSON or YAML payload, choosing the parser from the suffix."""

    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(path)
    return read_json(path)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
