"""Stylist: style descriptions compiled to CSS text."""

from stylist.builder import current_rule, declare, sub_rule
from stylist.formatter import Decoration, Formatter
from stylist.identity import IdentityRegistry, name_of
from stylist.model import (
    BLACK,
    TRANSPARENT,
    WHITE,
    Color,
    Composite,
    Literal,
    Properties,
    RenderTarget,
    StyleRule,
    Value,
)
from stylist.presets import PRESETS, preset
from stylist.style import Style, ValueStyle, style, styles_of, value_style

__version__ = "0.1.0"

__all__ = [
    # model
    "RenderTarget",
    "Literal",
    "Composite",
    "Value",
    "Properties",
    "StyleRule",
    "Color",
    "WHITE",
    "BLACK",
    "TRANSPARENT",
    # building
    "Style",
    "ValueStyle",
    "style",
    "value_style",
    "styles_of",
    "declare",
    "sub_rule",
    "current_rule",
    "name_of",
    "IdentityRegistry",
    # formatting
    "Decoration",
    "Formatter",
    "PRESETS",
    "preset",
]
