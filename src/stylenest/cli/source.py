"""Loading style trees from JSON files for the CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click


def load_tree(path: str) -> Any:
    """Read a JSON style tree from *path*; exits with code 1 if it cannot be decoded."""
    source_path = Path(path)
    try:
        return json.loads(source_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        click.echo(
            f"Error: {source_path.name} is not valid UTF-8 "
            f"(byte {exc.start}: {exc.reason})",
            err=True,
        )
        sys.exit(1)
    except json.JSONDecodeError as exc:
        click.echo(
            f"Error: invalid JSON in {source_path.name}: {exc.msg} "
            f"(line {exc.lineno}, column {exc.colno})",
            err=True,
        )
        sys.exit(1)
