"""Style descriptions and the providers that supply them."""

from __future__ import annotations

import functools
import threading
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar, runtime_checkable

from stylist.identity import name_of
from stylist.model.rule import StyleRule

T = TypeVar("T")


def _describe(fn: Callable[..., Any]) -> str:
    qualname = getattr(fn, "__qualname__", "")
    if not qualname or "<lambda>" in qualname:
        return ""
    return f"{fn.__module__}.{qualname}"


class Style:
    """A style description: a callback declaring properties and sub rules.

    The callback runs with this style's rule active (see ``stylist.builder``).
    The generated class name is derived from the callback's identity, so the
    same callback always maps to the same selector.
    """

    def __init__(self, declare: Callable[[], None], description: str | None = None) -> None:
        self._declare = declare
        self.description = _describe(declare) if description is None else description

    def declare(self) -> None:
        self._declare()

    @property
    def name(self) -> str:
        return name_of(self._declare)

    @property
    def selector(self) -> str:
        return "." + self.name

    def rule(self) -> StyleRule:
        """Build this style's rule tree."""
        from stylist.builder import build

        return build(self)

    def __repr__(self) -> str:
        return f"Style({self.description or self.name})"


def style(fn: Callable[[], None]) -> Style:
    """Decorator turning a declaring function into a ``Style``."""
    return functools.wraps(fn)(Style(fn))


def as_style(obj: Style | Callable[[], None]) -> Style:
    return obj if isinstance(obj, Style) else Style(obj)


class ValueStyle(Generic[T]):
    """A family of styles parametrized by a value, typically an enum constant.

    ``of(value)`` returns the same ``Style`` for the same value, so every
    member keeps a stable class name.
    """

    def __init__(
        self,
        declare: Callable[[T], None],
        over: type[Enum] | Iterable[T] | None = None,
        description: str | None = None,
    ) -> None:
        self._declare = declare
        self._over = over
        self.description = _describe(declare) if description is None else description
        self._lock = threading.Lock()
        self._styles: dict[Any, Style] = {}

    def of(self, value: T) -> Style:
        with self._lock:
            found = self._styles.get(value)
            if found is None:
                label = getattr(value, "name", value)
                description = f"{self.description}[{label}]" if self.description else ""
                found = Style(functools.partial(self._declare, value), description)
                self._styles[value] = found
            return found

    def styles(self) -> list[Style]:
        """Return one style per value this family ranges over."""
        if self._over is None:
            return []
        return [self.of(value) for value in self._over]


def value_style(over: type[Enum] | Iterable[Any]) -> Callable[[Callable[[Any], None]], ValueStyle]:
    """Decorator building a ``ValueStyle`` over the given values."""

    def decorate(fn: Callable[[Any], None]) -> ValueStyle:
        return ValueStyle(fn, over)

    return decorate


@runtime_checkable
class StyleProvider(Protocol):
    """Anything that can list style descriptions in order."""

    def styles(self) -> Iterable[Any]: ...


def styles_of(*providers: Any) -> list[Style]:
    """Flatten styles, style families, providers and iterables into one list."""
    found: list[Style] = []
    for provider in providers:
        if isinstance(provider, Style):
            found.append(provider)
        elif isinstance(provider, StyleProvider):
            found.extend(styles_of(*provider.styles()))
        elif isinstance(provider, Iterable) and not isinstance(provider, (str, bytes)):
            found.extend(styles_of(*provider))
        elif callable(provider):
            found.append(Style(provider))
        else:
            raise TypeError(f"Not a style provider: {provider!r}")
    return found
