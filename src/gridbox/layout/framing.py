"""Drawing a border around a box."""

from __future__ import annotations

from ..core.grid import Grid, fill, singleton
from .combinators import hconcat, vconcat
from .styles import ASCII, BorderStyle


def framed(box: Grid, style: BorderStyle = ASCII) -> Grid:
    """Surround ``box`` with a one-cell border.

    The result is two rows taller and two columns wider than ``box``. The
    default ASCII style draws ``+`` corners, ``-`` edges along the top and
    bottom and ``|`` edges on the sides:

        +--+
        |ab|
        +--+
    """
    h, w = box.dimensions()
    top = hconcat([
        singleton(style.top_left),
        fill(style.horizontal, 1, w),
        singleton(style.top_right),
    ])
    middle = hconcat([
        fill(style.vertical, h, 1),
        box,
        fill(style.vertical, h, 1),
    ])
    bottom = hconcat([
        singleton(style.bottom_left),
        fill(style.horizontal, 1, w),
        singleton(style.bottom_right),
    ])
    return vconcat([top, middle, bottom])
