"""Combinators for composing boxes."""

from .alignment import ColumnAlign, RowAlign, pad_to
from .combinators import (
    above,
    beside,
    hconcat,
    heighten,
    hsep,
    pad,
    punctuate_h,
    punctuate_v,
    vconcat,
    vsep,
    widen,
)
from .framing import framed
from .grid_layout import grid
from .styles import ASCII, BORDER_STYLES, DOUBLE, LIGHT, ROUNDED, BorderStyle, StyleLoader

__all__ = [
    "ColumnAlign",
    "RowAlign",
    "pad_to",
    "above",
    "beside",
    "hconcat",
    "heighten",
    "hsep",
    "pad",
    "punctuate_h",
    "punctuate_v",
    "vconcat",
    "vsep",
    "widen",
    "framed",
    "grid",
    "ASCII",
    "BORDER_STYLES",
    "DOUBLE",
    "LIGHT",
    "ROUNDED",
    "BorderStyle",
    "StyleLoader",
]
