"""Output formatting helpers for the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any


def print_object(data: dict[str, Any], *, json_mode: bool = False) -> None:
    """Print a mapping as JSON or indented key-value pairs."""
    if json_mode:
        print(json.dumps(data, indent=2, default=str))
        return
    _print_pairs(data, indent=0)


def _print_pairs(data: dict[str, Any], *, indent: int) -> None:
    pad = "  " * indent
    for k, v in data.items():
        if isinstance(v, dict):
            print(f"{pad}{k}:")
            _print_pairs(v, indent=indent + 1)
        elif isinstance(v, list):
            print(f"{pad}{k}: {', '.join(str(item) for item in v) or '(none)'}")
        else:
            print(f"{pad}{k}: {'(unset)' if v is None else v}")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {msg}", file=sys.stderr)
