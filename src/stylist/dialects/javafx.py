"""JavaFX dialect: rewrites CSS properties into JavaFX stylesheet form."""

from __future__ import annotations

from stylist.formatter import Formatter
from stylist.model.color import TRANSPARENT, Color
from stylist.model.properties import Properties
from stylist.model.target import RenderTarget
from stylist.model.value import Literal, Value

# CSS names with a different JavaFX name
PROPERTY_NAMES = {
    "width": "pref-width",
    "height": "pref-height",
    "color": "text-fill",
    "stroke-dasharray": "stroke-dash-array",
}

CURSOR_VALUES = {"pointer": "hand"}

SIDES = ("top", "right", "bottom", "left")


def sides(template: str) -> list[str]:
    """Expand ``*`` in *template* to each box side, in top/right/bottom/left order."""
    return [template.replace("*", side) for side in SIDES]


def alignment(horizontal: str | None, vertical: str | None) -> str:
    """Combine CSS text-align/vertical-align values into a JavaFX alignment."""
    h = horizontal or "left"
    v = vertical or "center"
    if v == "middle":
        v = "center"
    if h == "center" and v == "center":
        return "center"
    return f"{v}-{h}"


class JavaFXLizer:
    """Post-processor converting a rule's properties to JavaFX names and values.

    Box-model longhands fold into shorthands when all four sides agree,
    ``text-align``/``vertical-align`` merge into ``alignment``, and every
    name gets the ``-fx-`` prefix after the static name table is applied.
    """

    def __init__(self, prefix: str = RenderTarget.JAVAFX.prefix) -> None:
        self.prefix = prefix

    def __call__(self, properties: Properties) -> None:
        properties.compact_to("padding", "0", sides("padding-*"))
        properties.compact_to("border-width", "0", sides("border-*-width"))
        properties.compact_to("border-style", "solid", sides("border-*-style"))
        properties.compact_to("border-color", TRANSPARENT, sides("border-*-color"))
        properties.revalue("cursor", CURSOR_VALUES)

        self._alignment(properties)
        properties.rename(self.rename)

    def rename(self, name: Value) -> Value:
        text = name.render() or ""
        return Literal(self.prefix + PROPERTY_NAMES.get(text, text))

    @staticmethod
    def _alignment(properties: Properties) -> None:
        horizontal = properties.remove("text-align")
        vertical = properties.remove("vertical-align")
        if horizontal is None and vertical is None:
            return
        properties.set(
            "alignment",
            alignment(
                horizontal.render() if horizontal is not None else None,
                vertical.render() if vertical is not None else None,
            ),
        )


def javafx() -> Formatter:
    """Pretty formatter writing JavaFX stylesheets."""
    return Formatter.pretty().color(Color.to_rgb).post_processor(JavaFXLizer())
