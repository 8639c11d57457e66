"""Grid class: an immutable rectangle of characters."""

from __future__ import annotations

import operator
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..errors import InvalidCharacter, InvalidDimension

# One unicode code point per cell
CELL_DTYPE = np.dtype("<U1")

BLANK = " "


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1 or c == "\0":
        raise InvalidCharacter(f"Cell value must be a single character, got {c!r}")
    return c


def _check_size(height: int, width: int) -> None:
    try:
        height, width = operator.index(height), operator.index(width)
    except TypeError:
        raise InvalidDimension(
            f"Box dimensions must be integers, got {height!r}x{width!r}"
        ) from None
    if height < 0 or width < 0:
        raise InvalidDimension(
            f"Box dimensions must be non-negative, got {height}x{width}"
        )


class Grid:
    """Immutable rectangular block of characters.

    Cells are held in a read-only 2-D numpy array of single characters, so
    every row has exactly ``width`` cells and there are exactly ``height``
    rows. Either dimension may be zero: a ``3x0`` box is three empty rows,
    a ``0x4`` box has no rows at all. Combinators never modify a Grid; they
    allocate a new array for their result.

    Example:
        box = Grid.from_rows(["ab", "cd"])
        box.dimensions()   # (2, 2)
        box.row(1)         # "cd"
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: ArrayLike) -> None:
        """Create a grid from a 2-D array of single characters.

        Args:
            cells: Array-like of shape (height, width). The data is copied.

        Raises:
            InvalidCharacter: If cells is not 2-D or holds multi-character values
        """
        array = np.asarray(cells)
        if array.ndim != 2:
            raise InvalidCharacter(
                f"Grid cells must be a 2-D array, got {array.ndim} dimension(s)"
            )
        if array.size:
            if array.dtype.kind != "U":
                raise InvalidCharacter(
                    f"Grid cells must be strings, got dtype {array.dtype}"
                )
            if (np.char.str_len(array) != 1).any():
                raise InvalidCharacter("Grid cells must hold single characters")
        self._cells = self._freeze(np.array(array, dtype=CELL_DTYPE))

    @staticmethod
    def _freeze(array: NDArray[np.str_]) -> NDArray[np.str_]:
        array.flags.writeable = False
        return array

    @classmethod
    def _wrap(cls, array: NDArray[np.str_]) -> Grid:
        """Adopt a freshly built cell array without copying it."""
        grid = cls.__new__(cls)
        grid._cells = cls._freeze(array)
        return grid

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Grid:
        """Create a grid from equal-length strings, one per row.

        Raises:
            InvalidDimension: If the rows have different lengths
            InvalidCharacter: If a row is not a string or contains NUL
        """
        rows = list(rows)
        if not rows:
            return empty()
        for index, row in enumerate(rows):
            if not isinstance(row, str) or "\0" in row:
                raise InvalidCharacter(
                    f"Row {index} must be a string without NUL characters, got {row!r}"
                )
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimension(
                    f"Row {index} has length {len(row)}, expected {width}"
                )
        array = np.empty((len(rows), width), dtype=CELL_DTYPE)
        for index, row in enumerate(rows):
            array[index, :] = list(row)
        return cls._wrap(array)

    @property
    def cells(self) -> NDArray[np.str_]:
        """Read-only view of the underlying (height, width) character array."""
        return self._cells

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        """Number of characters in every row."""
        return self._cells.shape[1]

    def dimensions(self) -> tuple[int, int]:
        """Return (height, width)."""
        return self._cells.shape[0], self._cells.shape[1]

    def row(self, index: int) -> str:
        """Return row ``index`` as a string of exactly ``width`` characters."""
        return "".join(self._cells[index].tolist())

    def rows(self) -> Iterator[str]:
        """Iterate over the rows as strings, top to bottom."""
        for index in range(self.height):
            yield self.row(index)

    def __iter__(self) -> Iterator[str]:
        return self.rows()

    def __len__(self) -> int:
        return self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __str__(self) -> str:
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"


def singleton(c: str) -> Grid:
    """A 1x1 box holding ``c``."""
    return fill(c, 1, 1)


def fill(c: str, height: int, width: int) -> Grid:
    """A ``height`` x ``width`` box with every cell set to ``c``.

    Raises:
        InvalidDimension: If either dimension is negative
        InvalidCharacter: If ``c`` is not a single character
    """
    _check_char(c)
    _check_size(height, width)
    return Grid._wrap(np.full((height, width), c, dtype=CELL_DTYPE))


def space(height: int, width: int) -> Grid:
    """A blank box of the given size."""
    return fill(BLANK, height, width)


_EMPTY = Grid._wrap(np.empty((0, 0), dtype=CELL_DTYPE))


def empty() -> Grid:
    """The 0x0 box, identity for ``beside`` and ``above``."""
    return _EMPTY


def text(s: str) -> Grid:
    """A box showing ``s``, one row per line.

    Lines are left-aligned and padded with spaces to the longest line.
    """
    lines = s.split("\n")
    width = max(len(line) for line in lines)
    return Grid.from_rows([line.ljust(width) for line in lines])


def blank_array(height: int, width: int) -> NDArray[np.str_]:
    """Writable array of spaces for combinators to copy operands into."""
    return np.full((height, width), BLANK, dtype=CELL_DTYPE)

