"""Named formatter presets."""

from __future__ import annotations

from typing import Callable

from stylist.dialects.javafx import javafx
from stylist.formatter import Formatter

PRESETS: dict[str, Callable[[], Formatter]] = {
    "pretty": Formatter.pretty,
    "compact": Formatter.compact,
    "javafx": javafx,
}


def preset(name: str) -> Formatter:
    """Return a new formatter built from the preset called *name*."""
    try:
        factory = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown formatter preset: {name!r}") from None
    return factory()
