"""Keyframes: ``@keyframes`` blocks built from style descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from stylist.builder import active
from stylist.identity import name_of
from stylist.model.rule import StyleRule
from stylist.style import Style, as_style


@dataclass(frozen=True)
class Frame:
    progress: tuple[int, ...]
    style: Style

    def __str__(self) -> str:
        rule = StyleRule(selector="")
        with active(rule):
            self.style.declare()
        points = ",".join(f"{p}%" for p in self.progress)
        body = "".join(f"{name}:{value};" for name, value in rule.properties)
        return f"{points}{{{body}}}"


class Keyframes:
    """An animation's keyframes.

    Without an explicit *name* the animation is named from the identity
    registry, so it stays stable for the lifetime of the process.

    Frame bodies render canonical text only: a formatter's color writer,
    vendor fan-out and post-processors do not apply inside ``@keyframes``.
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self.frames: list[Frame] = []

    @property
    def name(self) -> str:
        return self._name or "Anima" + name_of(self)

    def frame(self, *args: object) -> Keyframes:
        """Add a frame: ``frame(0, 50, style)`` applies *style* at 0% and 50%."""
        if len(args) < 2:
            raise TypeError("frame() needs at least one progress point and a style")
        *progress, style = args
        self.frames.append(Frame(tuple(int(p) for p in progress), as_style(style)))
        return self

    def __str__(self) -> str:
        return f"@keyframes {self.name}{{{''.join(str(f) for f in self.frames)}}}"
