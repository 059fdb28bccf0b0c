"""CLI command: stylist format -- render a style provider as a stylesheet."""

from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any

import click

from stylist.errors import ProviderError, SinkError
from stylist.presets import PRESETS, preset


def load_provider(target: str) -> Any:
    """Resolve ``module`` or ``module:attribute`` to a style provider.

    A bare module must expose either a ``STYLES`` sequence or a ``styles()``
    function. Modules in the current working directory are importable.
    """
    module_name, _, attribute = target.partition(":")
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ProviderError(f"Cannot import {module_name!r}: {exc}") from exc

    if attribute:
        provider: Any = module
        for part in attribute.split("."):
            try:
                provider = getattr(provider, part)
            except AttributeError:
                raise ProviderError(f"{module_name!r} has no attribute {attribute!r}") from None
        return provider

    if hasattr(module, "STYLES"):
        return module.STYLES
    if callable(getattr(module, "styles", None)):
        return module
    raise ProviderError(f"{module_name!r} defines neither STYLES nor styles()")


@click.command("format")
@click.argument("target")
@click.option(
    "--preset",
    "preset_name",
    type=click.Choice(sorted(PRESETS)),
    default="pretty",
    show_default=True,
    help="Output profile.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def format_command(target: str, preset_name: str, output: Path | None, verbose: bool) -> None:
    """Render the styles provided by TARGET (``module`` or ``module:attribute``)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        provider = load_provider(target)
    except ProviderError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    formatter = preset(preset_name)

    if output is None:
        click.echo(formatter.format(provider), nl=False)
        return

    try:
        formatter.format_to(output, provider)
    except SinkError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {output}")
