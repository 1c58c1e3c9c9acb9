"""Output formatting helpers for the CLI."""

from __future__ import annotations

import json
import sys
from typing import Any

import yaml

OUTPUT_FORMATS = ("text", "json", "yaml")


def print_table(headers: list[str], rows: list[list[Any]], *, fmt: str = "text") -> None:
    """Print rows as aligned text columns, or as a JSON/YAML list of objects."""
    if fmt != "text":
        print_object([dict(zip(headers, row)) for row in rows], fmt=fmt)
        return

    if not rows:
        return

    widths = [len(h) for h in headers]
    str_rows = [[str(v) for v in row] for row in rows]
    for row in str_rows:
        for i, val in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(val))

    print("  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)))
    print("  ".join("-" * w for w in widths))
    for row in str_rows:
        print(
            "  ".join(val.ljust(widths[i]) if i < len(widths) else val for i, val in enumerate(row))
        )


def print_object(data: dict[str, Any] | list[Any], *, fmt: str = "text") -> None:
    """Print a mapping or list as JSON, YAML or key: value lines."""
    if fmt == "json":
        print(json.dumps(data, indent=2, default=str))
        return
    if fmt == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), end="")
        return

    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict):
                for k, v in item.items():
                    print(f"  {k}: {v}")
                print()
            else:
                print(f"  {item}")
        return

    for k, v in data.items():
        print(f"{k}: {v}")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {msg}", file=sys.stderr)
