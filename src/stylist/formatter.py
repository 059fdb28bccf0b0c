"""Formatter: renders style rule trees to stylesheet text.

A ``Formatter`` combines a ``Decoration`` (the whitespace written around
each token), a color writer, comment and empty-rule switches, and an
ordered list of post-processors run against each rule's properties just
before it is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import IO, Any, Callable, Iterable

from stylist.builder import build
from stylist.errors import SinkError
from stylist.model.color import Color
from stylist.model.properties import Properties
from stylist.model.rule import StyleRule
from stylist.model.value import ColorWriter, fan_out
from stylist.style import styles_of

logger = logging.getLogger(__name__)

PostProcessor = Callable[[Properties], None]


@dataclass(frozen=True)
class Decoration:
    """Text inserted at each point of a rule's output."""

    before_selector: str = ""
    after_selector: str = ""
    after_start_brace: str = ""
    before_end_brace: str = ""
    after_end_brace: str = ""
    before_property_name: str = ""
    after_property_name: str = ""
    before_property_value: str = ""
    after_property_value: str = ""
    after_property_line: str = ""


class Formatter:
    """Configurable stylesheet writer.

    Setters ignore ``None`` and return the formatter so configuration can be
    chained::

        Formatter.compact().color(Color.to_rgb).post_processor(fix_names)

    Post-processors mutate the properties of the rule being rendered.
    Rendering the same tree through two post-processing formatters lets the
    second observe the first one's changes; render from ``StyleRule.copy()``
    when that matters.
    """

    def __init__(self) -> None:
        self.decoration = Decoration()
        self.color_writer: ColorWriter = Color.to_hsl
        self.comments = False
        self.show_empty = False
        self.post_processors: list[PostProcessor] = []

    # --- configuration --------------------------------------------------------

    def _decorate(self, **changes: str | None) -> Formatter:
        changes = {key: value for key, value in changes.items() if value is not None}
        self.decoration = replace(self.decoration, **changes)
        return self

    def selector(self, before: str | None = None, after: str | None = None) -> Formatter:
        return self._decorate(before_selector=before, after_selector=after)

    def start_brace(self, after: str | None = None) -> Formatter:
        return self._decorate(after_start_brace=after)

    def end_brace(self, before: str | None = None, after: str | None = None) -> Formatter:
        return self._decorate(before_end_brace=before, after_end_brace=after)

    def property_name(self, before: str | None = None, after: str | None = None) -> Formatter:
        return self._decorate(before_property_name=before, after_property_name=after)

    def property_value(self, before: str | None = None, after: str | None = None) -> Formatter:
        return self._decorate(before_property_value=before, after_property_value=after)

    def property_line(self, after: str | None = None) -> Formatter:
        return self._decorate(after_property_line=after)

    def color(self, writer: ColorWriter | None) -> Formatter:
        if writer is not None:
            self.color_writer = writer
        return self

    def comment(self, enabled: bool) -> Formatter:
        self.comments = enabled
        return self

    def show_empty_style(self, enabled: bool) -> Formatter:
        self.show_empty = enabled
        return self

    def post_processor(self, processor: PostProcessor | None) -> Formatter:
        if processor is not None:
            self.post_processors.append(processor)
        return self

    # --- presets --------------------------------------------------------------

    @staticmethod
    def pretty() -> Formatter:
        """Human-readable output: one property per line, blank line between rules."""
        return (
            Formatter()
            .comment(True)
            .selector("", " ")
            .start_brace("\n")
            .property_name("\t", "")
            .property_value(" ", "")
            .property_line("\n")
            .end_brace("", "\n\n")
        )

    @staticmethod
    def compact() -> Formatter:
        """Machine-readable output without any decoration."""
        return Formatter()

    # --- rendering ------------------------------------------------------------

    def format_rule(self, rule: StyleRule) -> str:
        """Render *rule* and its descendants."""
        out: list[str] = []
        self._write(rule, out)
        return "".join(out)

    def _write(self, rule: StyleRule, out: list[str]) -> None:
        if not self.show_empty and len(rule.properties) == 0:
            for child in rule.children:
                self._write(child, out)
            return

        for processor in self.post_processors:
            processor(rule.properties)

        d = self.decoration
        out.append(d.before_selector)
        out.append(self._comment(rule.description))
        out.append(rule.selector)
        out.append(d.after_selector)
        out.append("{")
        out.append(d.after_start_brace)

        for name, value in rule.properties:
            for name_text, value_text in fan_out(name, value, self.color_writer):
                out.append(d.before_property_name)
                out.append(name_text)
                out.append(d.after_property_name)
                out.append(":")
                out.append(d.before_property_value)
                out.append(value_text)
                out.append(d.after_property_value)
                out.append(";")
                out.append(d.after_property_line)

        out.append(d.before_end_brace)
        out.append("}")
        out.append(d.after_end_brace)

        for child in rule.children:
            self._write(child, out)

    def _comment(self, message: str) -> str:
        if self.comments and message:
            return f"/* {message} */"
        return ""

    def format(self, *styles: Any) -> str:
        """Render a stylesheet from style descriptions, ordered by selector."""
        rules = sorted(build(s) for s in styles_of(*styles))
        logger.debug("Formatting %d rule(s)", len(rules))
        return "".join(self.format_rule(rule) for rule in rules)

    def format_to(self, sink: str | Path | IO[str], *styles: Any) -> Path | None:
        """Write the stylesheet for *styles* to a path or an open text stream.

        Parent directories of a path are created as needed. A stream is
        always closed, even when a style callback or the write fails.
        """
        if isinstance(sink, (str, Path)):
            text = self.format(*styles)
            path = Path(sink)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(text, encoding="utf-8")
            except OSError as exc:
                raise SinkError(f"Cannot write stylesheet to {path}: {exc}", path) from exc
            logger.info("Wrote %d characters to %s", len(text), path)
            return path

        try:
            sink.write(self.format(*styles))
        except OSError as exc:
            raise SinkError(f"Cannot write stylesheet: {exc}") from exc
        finally:
            sink.close()
        return None

