"""Combinators that compose boxes side by side and on top of each other."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..core.grid import Grid, blank_array, empty, space
from ..errors import InvalidDimension
from .alignment import Alignment, ColumnAlign, RowAlign, pad_to


def _concat(boxes: Iterable[Grid], axis: int, align: Alignment) -> Grid:
    """Left fold of pairwise concatenation along ``axis``, built in one pass.

    Folding pairwise re-pads the accumulated box every time a larger operand
    arrives, so an early box can be shifted several times. Only the offsets
    are tracked here: ``shift`` is the total leading padding applied to the
    accumulator so far, and each box remembers its offset relative to it.
    """
    cross = 1 - axis
    placed: list[tuple[Grid, int, int]] = []
    extent = 0
    length = 0
    shift = 0

    for box in boxes:
        size = box.cells.shape[cross]
        target = max(extent, size)
        shift += pad_to(target, extent, align)[0]
        lead = pad_to(target, size, align)[0]
        placed.append((box, length, lead - shift))
        extent = target
        length += box.cells.shape[axis]

    if not placed:
        return empty()
    if len(placed) == 1:
        # Folding a single box onto empty() yields the box itself
        return placed[0][0]

    shape = (length, extent) if axis == 0 else (extent, length)
    out = blank_array(*shape)
    for box, start, offset in placed:
        h, w = box.dimensions()
        if axis == 0:
            top, left = start, offset + shift
        else:
            top, left = offset + shift, start
        out[top:top + h, left:left + w] = box.cells
    return Grid._wrap(out)


def beside(a: Grid, b: Grid, align: ColumnAlign | str = ColumnAlign.CENTER) -> Grid:
    """Place ``b`` to the right of ``a``.

    The shorter box is padded with blank rows according to ``align``.
    Result height is the larger height; result width is the sum of widths.
    """
    return _concat((a, b), axis=1, align=ColumnAlign(align))


def above(a: Grid, b: Grid, align: RowAlign | str = RowAlign.CENTER) -> Grid:
    """Stack ``a`` on top of ``b``.

    The narrower box is padded with blank columns according to ``align``.
    Result width is the larger width; result height is the sum of heights.
    """
    return _concat((a, b), axis=0, align=RowAlign(align))


def hconcat(boxes: Iterable[Grid], align: ColumnAlign | str = ColumnAlign.CENTER) -> Grid:
    """Left fold of ``beside`` over ``boxes``, starting from ``empty()``."""
    return _concat(boxes, axis=1, align=ColumnAlign(align))


def vconcat(boxes: Iterable[Grid], align: RowAlign | str = RowAlign.CENTER) -> Grid:
    """Left fold of ``above`` over ``boxes``, starting from ``empty()``."""
    return _concat(boxes, axis=0, align=RowAlign(align))


def pad(
    box: Grid,
    height: int,
    width: int,
    row_align: RowAlign | str = RowAlign.CENTER,
    col_align: ColumnAlign | str = ColumnAlign.CENTER,
) -> Grid:
    """Pad ``box`` with blanks to exactly ``height`` x ``width``.

    Args:
        box: Box to pad
        height: Target height, at least ``box.height``
        width: Target width, at least ``box.width``
        row_align: Horizontal placement of the box in the new width
        col_align: Vertical placement of the box in the new height

    Raises:
        InvalidDimension: If a target is smaller than the box
    """
    h, w = box.dimensions()
    top = pad_to(height, h, ColumnAlign(col_align))[0]
    left = pad_to(width, w, RowAlign(row_align))[0]
    if (height, width) == (h, w):
        return box

    out = blank_array(height, width)
    out[top:top + h, left:left + w] = box.cells
    return Grid._wrap(out)


def widen(box: Grid, width: int, align: RowAlign | str = RowAlign.CENTER) -> Grid:
    """Pad ``box`` with blank columns to ``width``.

    Raises:
        InvalidDimension: If ``width`` is smaller than the box's width
    """
    if width < box.width:
        raise InvalidDimension(
            f"Cannot widen a box of width {box.width} to {width}"
        )
    return pad(box, box.height, width, row_align=align)


def heighten(box: Grid, height: int, align: ColumnAlign | str = ColumnAlign.CENTER) -> Grid:
    """Pad ``box`` with blank rows to ``height``.

    Raises:
        InvalidDimension: If ``height`` is smaller than the box's height
    """
    if height < box.height:
        raise InvalidDimension(
            f"Cannot heighten a box of height {box.height} to {height}"
        )
    return pad(box, height, box.width, col_align=align)


def _intersperse(boxes: Iterable[Grid], separator: Grid) -> list[Grid]:
    result: list[Grid] = []
    for box in boxes:
        if result:
            result.append(separator)
        result.append(box)
    return result


def punctuate_h(
    boxes: Sequence[Grid],
    punct: Grid,
    align: ColumnAlign | str = ColumnAlign.CENTER,
) -> Grid:
    """Concatenate ``boxes`` horizontally with ``punct`` between neighbours."""
    return hconcat(_intersperse(boxes, punct), align)


def punctuate_v(
    boxes: Sequence[Grid],
    punct: Grid,
    align: RowAlign | str = RowAlign.CENTER,
) -> Grid:
    """Concatenate ``boxes`` vertically with ``punct`` between neighbours."""
    return vconcat(_intersperse(boxes, punct), align)


def hsep(
    boxes: Sequence[Grid],
    sep: int = 1,
    align: ColumnAlign | str = ColumnAlign.CENTER,
) -> Grid:
    """Concatenate ``boxes`` horizontally with ``sep`` blank columns between them."""
    if sep < 0:
        raise InvalidDimension(f"Separation must be non-negative, got {sep}")
    return punctuate_h(boxes, space(0, sep), align)


def vsep(
    boxes: Sequence[Grid],
    sep: int = 1,
    align: RowAlign | str = RowAlign.CENTER,
) -> Grid:
    """Concatenate ``boxes`` vertically with ``sep`` blank rows between them."""
    if sep < 0:
        raise InvalidDimension(f"Separation must be non-negative, got {sep}")
    return punctuate_v(boxes, space(sep, 0), align)
