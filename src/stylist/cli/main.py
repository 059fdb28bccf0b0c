"""Stylist CLI entry point: Click group with subcommands."""

import click

from stylist import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylist")
def cli() -> None:
    """Stylist - compile Python style descriptions to CSS."""


# Import and register subcommands
from stylist.cli.format import format_command  # noqa: E402

cli.add_command(format_command)
