"""Table layout: aligning a matrix of boxes into rows and columns."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..core.grid import Grid, empty
from ..errors import IrregularGrid
from .alignment import ColumnAlign, RowAlign
from .combinators import hconcat, pad, vconcat

logger = logging.getLogger(__name__)


def grid(
    matrix: Sequence[Sequence[Grid]],
    row_align: RowAlign | str = RowAlign.CENTER,
    col_align: ColumnAlign | str = ColumnAlign.CENTER,
) -> Grid:
    """Lay out a matrix of boxes as a table.

    Every column is as wide as its widest cell and every row as tall as its
    tallest cell. Sizes are reconciled over the whole matrix before anything
    is concatenated, so a cell's padding depends only on the maxima of its
    own row and column:

    1. ``col_widths[j]`` is the largest width in column ``j``
    2. ``row_heights[i]`` is the largest height in row ``i``
    3. each cell is padded to ``(row_heights[i], col_widths[j])``
    4. the rows are joined with ``hconcat`` and stacked with ``vconcat``

    Args:
        matrix: Rows of boxes; every row must have the same length
        row_align: Horizontal placement of a cell within its column
        col_align: Vertical placement of a cell within its row

    Returns:
        A single box holding the table

    Raises:
        IrregularGrid: If the rows have different lengths
    """
    rows = [list(row) for row in matrix]
    row_align = RowAlign(row_align)
    col_align = ColumnAlign(col_align)

    if not rows:
        return empty()

    n_cols = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != n_cols:
            raise IrregularGrid(
                f"Row {index} has {len(row)} cells, expected {n_cols}"
            )
    if n_cols == 0:
        return empty()

    # (n_rows, n_cols, 2) array of (height, width) per cell
    shapes = np.array(
        [[cell.dimensions() for cell in row] for row in rows], dtype=np.int64
    )
    row_heights = shapes[:, :, 0].max(axis=1)
    col_widths = shapes[:, :, 1].max(axis=0)
    logger.debug(
        f"Reconciled {len(rows)}x{n_cols} grid: row heights {row_heights.tolist()}, "
        f"column widths {col_widths.tolist()}"
    )

    row_boxes = []
    for i, row in enumerate(rows):
        padded = [
            pad(cell, int(row_heights[i]), int(col_widths[j]), row_align, col_align)
            for j, cell in enumerate(row)
        ]
        row_boxes.append(hconcat(padded, col_align))

    return vconcat(row_boxes, row_align)
