"""Command-line interface for entropykit using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import click
from entropykit import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """entropykit: binarization, range coding and rANS for a 4-symbol alphabet."""
    pass


# Register subcommands
from entropykit.commands.demo import demo  # noqa: E402

cli.add_command(demo)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
