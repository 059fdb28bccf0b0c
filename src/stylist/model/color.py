"""Color value: an HSLA color with hex/RGB construction and text forms."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _clamp(value: float, maximum: float) -> float:
    return 0 if value < 0 else maximum if maximum < value else value


def _round(value: float) -> int:
    # half-up rounding, not banker's rounding
    return math.floor(value + 0.5)


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Color:
    """A color in the HSL model with an alpha channel.

    Attributes:
        hue: Angle on the color wheel, normalized into ``0..359``.
        saturation: Colorfulness in percent, clamped to ``0..100``.
        lightness: Lightness in percent, clamped to ``0..100``.
        alpha: Opacity, clamped to ``0..1``.
    """

    hue: int
    saturation: int
    lightness: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", int(self.hue) % 360)
        object.__setattr__(self, "saturation", int(_clamp(self.saturation, 100)))
        object.__setattr__(self, "lightness", int(_clamp(self.lightness, 100)))
        object.__setattr__(self, "alpha", float(_clamp(self.alpha, 1)))

    # --- adjustments ----------------------------------------------------------

    def adjust_hue(self, amount: int) -> Color:
        return Color(self.hue + amount, self.saturation, self.lightness, self.alpha)

    def saturate(self, amount: int) -> Color:
        return Color(self.hue, self.saturation + amount, self.lightness, self.alpha)

    def lighten(self, amount: int) -> Color:
        """Positive *amount* makes the color lighter, negative darker."""
        return Color(self.hue, self.saturation, self.lightness + amount, self.alpha)

    def opacify(self, amount: float) -> Color:
        return Color(self.hue, self.saturation, self.lightness, self.alpha + amount)

    def grayscale(self) -> Color:
        return self.saturate(-100)

    def complement(self) -> Color:
        return self.adjust_hue(180)

    # --- text forms -----------------------------------------------------------

    def to_hsl(self) -> str:
        """Return the ``hsl(...)`` or ``hsla(...)`` expression."""
        body = f"{self.hue},{self.saturation}%,{self.lightness}%"
        if self.alpha == 1:
            return f"hsl({body})"
        return f"hsla({body},{_number(self.alpha)})"

    def to_rgb(self) -> str:
        """Return the ``rgb(...)`` or ``rgba(...)`` expression."""
        h, s, l = self.hue, self.saturation / 100, self.lightness
        spread = (l if l < 50 else 100 - l) * s
        high = 2.55 * (l + spread)
        low = 2.55 * (l - spread)
        diff = high - low

        if h < 60:
            rgb = (high, low + diff * (h / 60), low)
        elif h < 120:
            rgb = (((120 - h) / 60) * diff + low, high, low)
        elif h < 180:
            rgb = (low, high, ((h - 120) / 60) * diff + low)
        elif h < 240:
            rgb = (low, ((240 - h) / 60) * diff + low, high)
        elif h < 300:
            rgb = (((h - 240) / 60) * diff + low, low, high)
        else:
            rgb = (high, low, ((360 - h) / 60) * diff + low)

        body = ",".join(str(_round(c)) for c in rgb)
        if self.alpha == 1:
            return f"rgb({body})"
        return f"rgba({body},{_number(self.alpha)})"

    def __str__(self) -> str:
        if self.alpha == 0:
            return "transparent"
        if self.alpha == 1 and self.hue == 0 and self.saturation == 0:
            if self.lightness == 0:
                return "black"
            if self.lightness == 100:
                return "white"
        return self.to_hsl()

    # --- construction ---------------------------------------------------------

    @staticmethod
    def rgb(code: str | int | None, green: int | None = None, blue: int | None = None) -> Color:
        """Create a color from a hex code (``#abc``/``#aabbcc``) or RGB components.

        An unparseable hex code yields ``TRANSPARENT``.
        """
        if green is not None and blue is not None:
            return Color.rgba(int(code), green, blue, 1)
        if not isinstance(code, str):
            return TRANSPARENT

        code = code.removeprefix("#")
        try:
            if len(code) == 3:
                r, g, b = (int(c * 2, 16) for c in code)
            elif len(code) == 6:
                r, g, b = (int(code[i : i + 2], 16) for i in (0, 2, 4))
            else:
                return TRANSPARENT
        except ValueError:
            return TRANSPARENT
        return Color.rgba(r, g, b, 1)

    @staticmethod
    def rgba(red: int, green: int, blue: int, alpha: float) -> Color:
        """Create a color from RGB components (clamped to ``0..255``) and alpha."""
        r = _clamp(red, 255) / 255
        g = _clamp(green, 255) / 255
        b = _clamp(blue, 255) / 255

        high = max(r, g, b)
        low = min(r, g, b)
        diff = high - low
        total = high + low
        lightness = total / 2

        hue = 0.0
        saturation = 0.0
        if diff != 0:
            if high == r:
                hue = 60 * (g - b) / diff
            elif high == g:
                hue = 60 * (b - r) / diff + 120
            else:
                hue = 60 * (r - g) / diff + 240
            saturation = diff / total if lightness < 0.5 else diff / (2 - total)
        if hue < 0:
            hue += 360

        return Color(_round(hue), _round(saturation * 100), _round(lightness * 100), _clamp(alpha, 1))


def hsl(hue: int, saturation: int, lightness: int, alpha: float = 1.0) -> Color:
    return Color(hue, saturation, lightness, alpha)


WHITE = Color(0, 0, 100)
BLACK = Color(0, 0, 0)
TRANSPARENT = Color(0, 0, 0, 0)
