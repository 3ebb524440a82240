"""CLI command: stylenest render -- turn a JSON style tree into CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylenest.cli.source import load_tree
from stylenest.config import SheetFormat
from stylenest.errors import StyleError
from stylenest.serializer import generate_sheet


@click.command()
@click.argument("treefile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the stylesheet here instead of stdout.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Spaces per indentation level.",
)
def render(treefile: str, output: str | None, indent: int) -> None:
    """Render a JSON style tree as a CSS stylesheet."""
    tree = load_tree(treefile)
    try:
        sheet = generate_sheet(tree, SheetFormat.with_indent(indent))
    except StyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output is None:
        click.echo(sheet, nl=False)
        return

    out_path = Path(output)
    out_path.write_text(sheet, encoding="utf-8")
    click.echo(f"Wrote {out_path.name}", err=True)
