"""Rule tree builder.

Running a style description produces a ``StyleRule``. While the
description's callback runs, its rule is the *active* rule of the calling
thread and every ``declare`` call writes into it. Nested descriptions
(sub rules) push their own rule and restore the caller's on exit, so
builds are re-entrant within a thread and independent across threads.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from stylist.errors import NoActiveRuleError
from stylist.model.rule import StyleRule

if TYPE_CHECKING:
    from stylist.style import Style

logger = logging.getLogger(__name__)

PLACEHOLDER = "$"
PSEUDO_ELEMENT = "::"

_local = threading.local()


def _stack() -> list[StyleRule]:
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack


def current_rule() -> StyleRule | None:
    """Return the rule being built on this thread, if any."""
    stack = _stack()
    return stack[-1] if stack else None


@contextmanager
def active(rule: StyleRule) -> Iterator[StyleRule]:
    """Make *rule* the active rule for the duration of the block."""
    stack = _stack()
    depth = len(stack)
    stack.append(rule)
    try:
        yield rule
    finally:
        del stack[depth:]


def declare(name: object, value: object) -> None:
    """Set a property on the active rule."""
    rule = current_rule()
    if rule is None:
        raise NoActiveRuleError(f"Property {name} declared outside of a style rule")
    rule.properties.set(name, value)


def is_declared(name: object, value: object) -> bool:
    """Return True if the active rule holds *name* with *value*."""
    rule = current_rule()
    return rule is not None and rule.properties.contains(name, value)


def compose_selector(template: str, parent: str) -> str:
    """Substitute *parent* into *template*, keeping any pseudo-element last.

    ``compose_selector("$:hover", ".foo::before")`` gives ``.foo:hover::before``.
    """
    index = parent.find(PSEUDO_ELEMENT)
    if index == -1:
        head, pseudo = parent, ""
    else:
        head, pseudo = parent[:index], parent[index:]
    return template.replace(PLACEHOLDER, head) + pseudo


def build(style: Style) -> StyleRule:
    """Build the root rule for *style*."""
    return _build(PLACEHOLDER, style, root=True)


def sub_rule(template: str, style: Style) -> StyleRule:
    """Build a child of the active rule whose selector derives from *template*."""
    return _build(template, style, root=False)


def _build(template: str, style: Style, root: bool) -> StyleRule:
    parent = current_rule()

    if parent is None or root:
        selector = "." + style.name
    else:
        selector = compose_selector(template, parent.selector)

    rule = StyleRule(selector, description=style.description if parent is None or root else "")
    logger.debug("Building rule %s", selector)

    with active(rule):
        style.declare()

    # attach only once the callback has completed
    if parent is not None:
        parent.children.append(rule)
    return rule
