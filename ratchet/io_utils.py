"""Utility helpers for reading template data and writing output."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = {".yaml", ".yml"}


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def load_data(path: Path) -> Any:
    """Load render data from a JSON or YAML file, chosen by suffix."""

    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    if path.suffix.lower() in YAML_SUFFIXES:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    return read_json(path)


def ensure_dir(path: Path) -> Path:
    """Ensure that a directory exists and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text(path: Path, content: str) -> Path:
    """Write text content to a file, creating parent directories as needed."""

    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
