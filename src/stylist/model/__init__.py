"""Stylist model layer -- public type re-exports."""

from stylist.model.color import BLACK, TRANSPARENT, WHITE, Color, hsl
from stylist.model.properties import Properties
from stylist.model.rule import StyleRule
from stylist.model.target import RenderTarget
from stylist.model.value import Composite, Literal, Value, fan_out, join, of, prefixed

__all__ = [
    # target
    "RenderTarget",
    # value
    "Literal",
    "Composite",
    "Value",
    "of",
    "join",
    "prefixed",
    "fan_out",
    # properties
    "Properties",
    # rule
    "StyleRule",
    # color
    "Color",
    "hsl",
    "WHITE",
    "BLACK",
    "TRANSPARENT",
]
