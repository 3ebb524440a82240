"""CLI command: stylenest normalize -- print the flattened representation."""

from __future__ import annotations

import json
import sys

import click

from stylenest.cli.source import load_tree
from stylenest.errors import StyleError
from stylenest.normalizer import normalize as run_normalize


@click.command()
@click.argument("treefile", type=click.Path(exists=True, dir_okay=False))
def normalize(treefile: str) -> None:
    """Flatten a JSON style tree and print the result as JSON.

    Top-level keys of the output are full selector paths, merged @media
    conditions, and pass-through at-rules such as @charset.
    """
    tree = load_tree(treefile)
    try:
        flat = run_normalize(tree)
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(flat, indent=2, ensure_ascii=False))
