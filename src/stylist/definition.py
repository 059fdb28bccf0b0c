"""Property definitions: the seam property builders declare through.

A property builder subclasses ``PropertyDefinition`` and turns typed
arguments into ``value(...)`` calls, which declare on the rule currently
being built. Only a few generic builders live here; they exist to drive
the engine, not to catalog CSS.
"""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from stylist.builder import declare, is_declared, sub_rule
from stylist.model.rule import StyleRule
from stylist.model.target import RenderTarget
from stylist.model.value import Literal, Value, join, prefixed
from stylist.style import Style, as_style

D = TypeVar("D", bound="PropertyDefinition")

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def hyphenate(name: str) -> str:
    """``UserSelect`` -> ``user-select``."""
    return _CAMEL.sub("-", name).lower()


def length(size: float, unit: str = "") -> str:
    return (Literal(size).render() or "0") + unit


def calc(expression: str) -> Literal:
    """A ``calc()`` value with a ``-webkit-calc()`` fallback line."""
    return Literal(f"calc({expression})").override(
        RenderTarget.WEBKIT, f"{RenderTarget.WEBKIT.prefix}calc({expression})"
    )


class PropertyDefinition:
    """Base class for property builders.

    Args:
        name: CSS property name; defaults to the hyphenated class name.
        vendors: Targets whose prefixed name is written alongside the
            standard one.
    """

    def __init__(self, name: str | None = None, *vendors: RenderTarget) -> None:
        self.name = name or hyphenate(type(self).__name__)
        self.vendors = frozenset(vendors)

    def property_name(self, name: str | None = None) -> Value:
        return prefixed(name or self.name, *self.vendors)

    def value(self: D, value: object, name: str | None = None) -> D:
        """Declare *value* for this property (or the related property *name*)."""
        declare(self.property_name(name), value)
        return self

    def values(self: D, *values: object, separator: str = " ", name: str | None = None) -> D:
        return self.value(join(values, separator), name)

    def initial(self: D) -> D:
        return self.value("initial")

    def inherit(self: D) -> D:
        return self.value("inherit")

    def is_(self, value: object, name: str | None = None) -> bool:
        """Return True if the rule being built already holds *value*."""
        return is_declared(name or self.name, value)


# --- sub rules ----------------------------------------------------------------


def sub(template: str, style: Style | Callable[[], None]) -> StyleRule:
    """Declare a sub rule of the rule being built, e.g. ``sub("$ > li", item)``."""
    return sub_rule(template, as_style(style))


def hover(style: Style | Callable[[], None]) -> StyleRule:
    return sub("$:hover", style)


def focus(style: Style | Callable[[], None]) -> StyleRule:
    return sub("$:focus", style)


def before(style: Style | Callable[[], None]) -> StyleRule:
    return sub("$::before", style)


def after(style: Style | Callable[[], None]) -> StyleRule:
    return sub("$::after", style)


def selection(style: Style | Callable[[], None]) -> StyleRule:
    return sub("$::selection", style)


# --- generic builders -----------------------------------------------------------


class Property(PropertyDefinition):
    """A property of any name: ``Property("color").set("black")``."""

    def __init__(self, name: str, *vendors: RenderTarget) -> None:
        super().__init__(name, *vendors)

    def set(self, *values: object, separator: str = " ") -> Property:
        if len(values) == 1:
            return self.value(values[0])
        return self.values(*values, separator=separator)


class _Box(PropertyDefinition):
    """Four-sided box properties written as longhands."""

    def top(self, size: object, unit: str = "") -> _Box:
        return self._side("top", size, unit)

    def right(self, size: object, unit: str = "") -> _Box:
        return self._side("right", size, unit)

    def bottom(self, size: object, unit: str = "") -> _Box:
        return self._side("bottom", size, unit)

    def left(self, size: object, unit: str = "") -> _Box:
        return self._side("left", size, unit)

    def horizontal(self, size: object, unit: str = "") -> _Box:
        return self.left(size, unit).right(size, unit)

    def vertical(self, size: object, unit: str = "") -> _Box:
        return self.top(size, unit).bottom(size, unit)

    def size(self, size: object, unit: str = "") -> _Box:
        return self.horizontal(size, unit).vertical(size, unit)

    def _side(self, side: str, size: object, unit: str) -> _Box:
        value = length(size, unit) if isinstance(size, (int, float)) else size
        return self.value(value, f"{self.name}-{side}")


class Margin(_Box):
    def auto(self) -> Margin:
        return self.horizontal("auto")


class Padding(_Box):
    pass


class UserSelect(PropertyDefinition):
    def __init__(self) -> None:
        super().__init__(None, RenderTarget.MOZILLA, RenderTarget.MS, RenderTarget.WEBKIT)

    def none(self) -> UserSelect:
        return self.value("none")

    def text(self) -> UserSelect:
        return self.value("text")


class Transform(PropertyDefinition):
    def __init__(self) -> None:
        super().__init__(None, RenderTarget.WEBKIT)

    def rotate(self, angle: float, unit: str = "deg") -> Transform:
        return self.value(f"rotate({length(angle, unit)})")

    def translate(self, x: float, unit: str = "px") -> Transform:
        return self.value(f"translate({length(x, unit)},{length(x, unit)})")


margin = Margin()
padding = Padding()
user_select = UserSelect()
transform = Transform()
