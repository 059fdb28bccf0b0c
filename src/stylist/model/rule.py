"""Style rule tree: a selector, its properties and nested child rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from stylist.model.properties import Properties

if TYPE_CHECKING:
    from stylist.style import Style


@dataclass(eq=False)
class StyleRule:
    """A single CSS style rule with its sub rules.

    Rules order by selector so a stylesheet renders deterministically
    regardless of declaration order.
    """

    selector: str
    properties: Properties = field(default_factory=Properties)
    children: list[StyleRule] = field(default_factory=list)
    description: str = ""

    @classmethod
    def create(cls, style: Style) -> StyleRule:
        """Build the root rule for *style*, selected by its identity class."""
        from stylist.builder import build

        return build(style)

    @classmethod
    def create_sub(cls, template: str, style: Style) -> StyleRule:
        """Build a child of the active rule; see ``stylist.builder.sub_rule``."""
        from stylist.builder import sub_rule

        return sub_rule(template, style)

    def __lt__(self, other: StyleRule) -> bool:
        return self.selector < other.selector

    def walk(self) -> Iterator[StyleRule]:
        """Yield this rule and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, selector: str) -> StyleRule | None:
        for rule in self.walk():
            if rule.selector == selector:
                return rule
        return None

    def copy(self) -> StyleRule:
        """Return a deep copy whose collections can be post-processed independently."""
        return StyleRule(
            selector=self.selector,
            properties=self.properties.copy(),
            children=[child.copy() for child in self.children],
            description=self.description,
        )
