"""Tests for the Grid representation and its constructors."""

import numpy as np
import pytest

from gridbox import (
    Grid,
    InvalidCharacter,
    InvalidDimension,
    empty,
    fill,
    singleton,
    space,
    text,
)

SHAPES = [(0, 0), (0, 3), (3, 0), (1, 1), (2, 4), (5, 2)]


def test_singleton():
    """A singleton is a 1x1 box holding its character."""
    box = singleton("x")
    assert box.dimensions() == (1, 1)
    assert box.height == 1
    assert box.width == 1
    assert list(box.rows()) == ["x"]


@pytest.mark.parametrize("height,width", SHAPES)
def test_fill_dimensions(height, width):
    """fill produces exactly the requested shape, degenerate ones included."""
    box = fill("#", height, width)
    assert box.dimensions() == (height, width)
    rows = list(box.rows())
    assert len(rows) == height
    assert all(row == "#" * width for row in rows)


@pytest.mark.parametrize("height,width", [(-1, 0), (0, -1), (-2, 3), (3, -2)])
def test_fill_rejects_negative_dimensions(height, width):
    with pytest.raises(InvalidDimension):
        fill("#", height, width)


@pytest.mark.parametrize("height,width", [(1.5, 2), (2, "3"), (None, 1)])
def test_fill_rejects_non_integer_dimensions(height, width):
    with pytest.raises(InvalidDimension):
        fill("#", height, width)


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError):
        space(-1, 1)


@pytest.mark.parametrize("value", ["", "ab", "\0", None, 7])
def test_fill_rejects_non_characters(value):
    with pytest.raises(InvalidCharacter):
        fill(value, 1, 1)


def test_space_is_blank():
    assert list(space(2, 3).rows()) == ["   ", "   "]


def test_empty():
    """The empty box has no rows and no columns."""
    box = empty()
    assert box.dimensions() == (0, 0)
    assert list(box.rows()) == []
    assert len(box) == 0


def test_zero_sized_boxes_are_distinct():
    assert space(0, 3) != space(3, 0)
    assert space(0, 3) != empty()
    assert space(3, 0) != empty()


def test_text_pads_lines_to_longest():
    box = text("ab\nc\n")
    assert box.dimensions() == (3, 2)
    assert list(box.rows()) == ["ab", "c ", "  "]


def test_text_of_empty_string():
    """An empty string is one empty line."""
    assert text("").dimensions() == (1, 0)


def test_from_rows():
    box = Grid.from_rows(["ab", "cd"])
    assert box.dimensions() == (2, 2)
    assert box.row(0) == "ab"
    assert box.row(1) == "cd"


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(InvalidDimension):
        Grid.from_rows(["ab", "c"])


@pytest.mark.parametrize("rows", [[["ab", "c"]], ["a\0b"], [None]])
def test_from_rows_rejects_non_string_rows(rows):
    """Rows must be plain strings so every cell holds exactly one character."""
    with pytest.raises(InvalidCharacter):
        Grid.from_rows(rows)


def test_text_rejects_nul():
    with pytest.raises(InvalidCharacter):
        text("a\0b")


def test_from_rows_empty():
    assert Grid.from_rows([]) == empty()


def test_constructor_copies_input():
    """Changing the source array after construction does not affect the grid."""
    source = np.array([["a", "b"], ["c", "d"]])
    box = Grid(source)
    source[0, 0] = "z"
    assert box.row(0) == "ab"


def test_cells_are_read_only():
    box = fill("a", 2, 2)
    with pytest.raises(ValueError):
        box.cells[0, 0] = "b"


def test_constructor_accepts_zero_width_rows():
    assert Grid(np.empty((2, 0))).dimensions() == (2, 0)


@pytest.mark.parametrize("cells", [["abc"], [["a", "bc"]], [[1, 2]]])
def test_constructor_rejects_bad_cells(cells):
    with pytest.raises(InvalidCharacter):
        Grid(cells)


def test_equality_and_hash():
    """Grids compare and hash by shape and content."""
    a = fill("a", 2, 2)
    b = Grid.from_rows(["aa", "aa"])
    assert a == b
    assert hash(a) == hash(b)
    assert a != fill("a", 2, 3)
    assert a != fill("b", 2, 2)
    assert len({a, b}) == 1


def test_iteration_yields_rows():
    assert list(Grid.from_rows(["xy", "zw"])) == ["xy", "zw"]


def test_str_and_repr():
    box = Grid.from_rows(["ab", "cd"])
    assert str(box) == "ab\ncd"
    assert repr(box) == "Grid(height=2, width=2)"
