"""Render targets: the output dialects a value can be written for."""

from __future__ import annotations

from enum import Enum


class RenderTarget(Enum):
    """An output dialect with its textual prefix.

    Declaration order is significant: vendor lines fan out in this order
    after the canonical ``STANDARD`` line.
    """

    STANDARD = ("standard", "")
    MOZILLA = ("mozilla", "-moz-")
    WEBKIT = ("webkit", "-webkit-")
    SAFARI = ("safari", "-webkit-")
    MS = ("ms", "-ms-")
    JAVAFX = ("javafx", "-fx-")

    def __init__(self, label: str, prefix: str) -> None:
        self.label = label
        self.prefix = prefix

    @property
    def is_canonical(self) -> bool:
        return self is RenderTarget.STANDARD

    def __str__(self) -> str:
        return self.prefix


def ordered(targets) -> list[RenderTarget]:
    """Return *targets* as a list: canonical first, then declaration order."""
    found = set(targets)
    found.add(RenderTarget.STANDARD)
    return [t for t in RenderTarget if t in found]
