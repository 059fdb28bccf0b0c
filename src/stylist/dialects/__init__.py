"""Dialect post-processors for non-CSS stylesheet targets."""

from stylist.dialects.javafx import JavaFXLizer, javafx

__all__ = ["JavaFXLizer", "javafx"]
