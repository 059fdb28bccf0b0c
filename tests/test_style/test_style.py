"""Tests for style descriptions and providers."""

from enum import Enum

import pytest

from stylist.builder import declare
from stylist.formatter import Formatter
from stylist.style import Style, ValueStyle, as_style, style, styles_of, value_style


class Size(Enum):
    SMALL = "10px"
    LARGE = "20px"


@style
def button():
    """A button."""
    declare("color", "black")


@value_style(Size)
def sized(size: Size):
    declare("font-size", size.value)


class _Provider:
    def styles(self):
        return [button, sized]


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------


class TestStyle:
    def test_decorator_keeps_metadata(self):
        assert isinstance(button, Style)
        assert button.__doc__ == "A button."
        assert button.description.endswith("button")

    def test_name_is_stable(self):
        assert button.name == button.name
        assert button.selector == "." + button.name

    def test_same_callback_same_name(self):
        def body():
            declare("a", "b")

        assert Style(body).name == Style(body).name

    def test_distinct_callbacks_distinct_names(self):
        assert Style(lambda: None).name != Style(lambda: None).name

    def test_lambda_has_no_description(self):
        assert Style(lambda: None).description == ""

    def test_explicit_description(self):
        assert Style(lambda: None, "custom").description == "custom"

    def test_rule(self):
        rule = button.rule()
        assert rule.selector == button.selector
        assert rule.properties.contains("color", "black")

    def test_as_style(self):
        assert as_style(button) is button
        assert isinstance(as_style(lambda: None), Style)


# ---------------------------------------------------------------------------
# ValueStyle
# ---------------------------------------------------------------------------


class TestValueStyle:
    def test_one_style_per_constant(self):
        members = sized.styles()
        assert len(members) == 2
        assert members[0] is sized.of(Size.SMALL)
        assert members[1] is sized.of(Size.LARGE)

    def test_distinct_names(self):
        assert sized.of(Size.SMALL).name != sized.of(Size.LARGE).name

    def test_member_declares_with_value(self):
        rule = sized.of(Size.LARGE).rule()
        assert rule.properties.contains("font-size", "20px")

    def test_member_description(self):
        assert sized.of(Size.SMALL).description.endswith("sized[SMALL]")

    def test_without_range(self):
        family = ValueStyle(lambda v: declare("width", v))
        assert family.styles() == []
        assert family.of("1px").rule().properties.contains("width", "1px")


# ---------------------------------------------------------------------------
# styles_of
# ---------------------------------------------------------------------------


class TestStylesOf:
    def test_flattens_everything(self):
        found = styles_of(button, [sized], _Provider())
        assert found == [button, sized.of(Size.SMALL), sized.of(Size.LARGE),
                         button, sized.of(Size.SMALL), sized.of(Size.LARGE)]

    def test_callable_wrapped(self):
        def body():
            declare("a", "b")

        (found,) = styles_of(body)
        assert isinstance(found, Style)

    def test_rejects_other_objects(self):
        with pytest.raises(TypeError):
            styles_of(42)

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            styles_of("button")

    def test_formats_family(self):
        text = Formatter.compact().format(sized)
        assert "font-size:10px;" in text
        assert "font-size:20px;" in text
