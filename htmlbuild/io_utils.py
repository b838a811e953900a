"""Utility helpers for structured file IO and diagnostics."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    """Load a YAML file; an empty file yields ``None``."""
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
