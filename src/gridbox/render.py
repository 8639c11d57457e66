"""Turning boxes into lines of text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterator, overload

from .core.grid import Grid


class RenderedLines(Sequence[str]):
    """The rows of a box as strings, produced on demand.

    Iterating twice yields the same lines again; nothing is cached beyond the
    box itself.
    """

    __slots__ = ("_box",)

    def __init__(self, box: Grid) -> None:
        self._box = box

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return [self._box.row(i) for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("line index out of range")
        return self._box.row(index)

    def __len__(self) -> int:
        return self._box.height

    def __iter__(self) -> Iterator[str]:
        return self._box.rows()

    def __repr__(self) -> str:
        return f"RenderedLines({self._box!r})"


def render(box: Grid) -> RenderedLines:
    """Lines of ``box``: exactly ``height`` strings of exactly ``width`` characters."""
    return RenderedLines(box)


def to_text(box: Grid) -> str:
    """Render ``box`` as a single newline-separated string."""
    return "\n".join(render(box))
