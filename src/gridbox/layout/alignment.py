"""Alignment policies and the padding rule shared by every combinator."""

from __future__ import annotations

from enum import Enum

from ..errors import InvalidDimension


class RowAlign(Enum):
    """Horizontal placement of a box stacked against wider boxes."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ColumnAlign(Enum):
    """Vertical placement of a box set beside taller boxes."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


Alignment = RowAlign | ColumnAlign

# Position of the content within the padded extent, in halves:
# 0 = flush with the start, 1 = centered, 2 = flush with the end
ALIGN_POSITIONS: dict[Alignment, int] = {
    RowAlign.LEFT: 0,
    RowAlign.CENTER: 1,
    RowAlign.RIGHT: 2,
    ColumnAlign.TOP: 0,
    ColumnAlign.CENTER: 1,
    ColumnAlign.BOTTOM: 2,
}


def pad_to(target: int, current: int, alignment: Alignment) -> tuple[int, int]:
    """Split the padding needed to grow ``current`` to ``target``.

    Centering rounds the leading side down, so an odd unit of padding always
    ends up trailing (below, or to the right of, the content).

    Args:
        target: Size to reach along one axis
        current: Size of the content along that axis
        alignment: Where the content sits within ``target``

    Returns:
        (leading, trailing) amounts of filler

    Raises:
        InvalidDimension: If ``target`` is smaller than ``current``
    """
    if current < 0 or target < current:
        raise InvalidDimension(
            f"Cannot pad size {current} to {target}"
        )
    extra = target - current
    leading = extra * ALIGN_POSITIONS[alignment] // 2
    return leading, extra - leading
