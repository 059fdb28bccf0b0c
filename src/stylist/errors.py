"""Error types."""

from __future__ import annotations

from pathlib import Path


class StylistError(Exception):
    """Base class for stylist errors."""


class NoActiveRuleError(StylistError):
    """Raised when a property is declared while no style rule is being built."""


class SinkError(StylistError):
    """Raised when formatted text cannot be written to its destination."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)


class ProviderError(StylistError):
    """Raised when a style provider cannot be loaded."""
