"""Core box representation."""

from .grid import Grid, empty, fill, singleton, space, text

__all__ = ["Grid", "empty", "fill", "singleton", "space", "text"]
