"""stylenest CLI entry point: Click group with subcommands."""

import logging

import click

from stylenest import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylenest")
@click.option("-v", "--verbose", is_flag=True, help="Log normalization details to stderr.")
def cli(verbose: bool) -> None:
    """stylenest - flatten nested JSON style trees into CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from stylenest.cli.normalize import normalize  # noqa: E402
from stylenest.cli.render import render  # noqa: E402

cli.add_command(normalize)
cli.add_command(render)
