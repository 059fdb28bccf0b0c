"""Value model: literal and composite expressions rendered per target.

A value is one of two variants:

    Literal    a single token (string, number or Color) with optional
               target-specific renderings.
    Composite  an ordered sequence of child values joined by a separator.

Rendering returns ``None`` for an absent value; the formatter omits the
property line instead of writing an empty token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from stylist.model.color import Color
from stylist.model.target import RenderTarget, ordered

ColorWriter = Callable[[Color], str]

STANDARD = RenderTarget.STANDARD


def _text(raw: object, color: ColorWriter | None) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, Color):
        return color(raw) if color is not None else str(raw)
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw)


class _Rendered:
    """Equality and hashing by canonical rendered text."""

    def render(self, target: RenderTarget = STANDARD, color: ColorWriter | None = None) -> str | None:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Literal, Composite)):
            return self.render() == other.render()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.render())

    def __str__(self) -> str:
        return self.render() or ""


@dataclass(frozen=True, eq=False)
class Literal(_Rendered):
    """A single token with optional per-target renderings.

    Attributes:
        raw: The wrapped string, number or Color. ``None`` is absent.
        overrides: Target-specific text, used instead of *raw* for that target.
            A ``None`` override makes the value absent for that target.
        targets: Non-canonical targets this value requires a line for.
    """

    raw: object
    overrides: dict[RenderTarget, str | None] = field(default_factory=dict)
    targets: frozenset[RenderTarget] = frozenset()

    def render(self, target: RenderTarget = STANDARD, color: ColorWriter | None = None) -> str | None:
        if target in self.overrides:
            text = self.overrides[target]
        else:
            text = _text(self.raw, color)
        return text or None

    def override(self, target: RenderTarget, text: str | None) -> Literal:
        """Return a copy rendering *text* for *target*."""
        overrides = dict(self.overrides)
        overrides[target] = text
        targets = self.targets if target.is_canonical else self.targets | {target}
        return Literal(self.raw, overrides, targets)

    def __repr__(self) -> str:
        return f"Literal({self.raw!r})"


@dataclass(frozen=True, eq=False)
class Composite(_Rendered):
    """Child values joined by *separator*."""

    children: tuple[Value, ...]
    separator: str = " "

    @property
    def targets(self) -> frozenset[RenderTarget]:
        found: frozenset[RenderTarget] = frozenset()
        for child in self.children:
            found |= child.targets
        return found

    def render(self, target: RenderTarget = STANDARD, color: ColorWriter | None = None) -> str | None:
        parts = []
        for child in self.children:
            text = child.render(target, color)
            if text is None:
                return None
            parts.append(text)
        return self.separator.join(parts) or None

    def __repr__(self) -> str:
        return f"Composite({list(self.children)!r}, {self.separator!r})"


Value = Literal | Composite


def of(obj: object) -> Value:
    """Coerce *obj* into a value; values pass through unchanged."""
    if isinstance(obj, (Literal, Composite)):
        return obj
    return Literal(obj)


def join(values: Iterable[object], separator: str = " ") -> Composite:
    return Composite(tuple(of(v) for v in values), separator)


def prefixed(text: str, *targets: RenderTarget) -> Literal:
    """Build a literal rendered as ``target.prefix + text`` for each target."""
    required = frozenset(t for t in targets if not t.is_canonical)
    return Literal(text, {t: t.prefix + text for t in required}, required)


def same(left: Value | None, right: Value | None) -> bool:
    """Return True if both values render the same canonical text."""
    if left is None or right is None:
        return left is right
    return left.render() == right.render()


def fan_out(name: Value, value: Value, color: ColorWriter | None = None) -> list[tuple[str, str]]:
    """Return the ``(name, value)`` text pairs to emit for one property.

    The canonical pair comes first, then one pair per required target in
    declaration order. Pairs already emitted are suppressed and pairs with
    an absent name or value are omitted.
    """
    lines: list[tuple[str, str]] = []
    for target in ordered(name.targets | value.targets):
        name_text = name.render(target, color)
        value_text = value.render(target, color)
        if name_text is None or value_text is None:
            continue
        pair = (name_text, value_text)
        if pair not in lines:
            lines.append(pair)
    return lines
