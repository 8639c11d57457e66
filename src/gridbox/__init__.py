"""gridbox - a text layout algebra of immutable rectangular boxes.

Boxes are built from characters and composed side by side, stacked,
padded, framed or laid out as tables, then rendered to lines of text:

    from gridbox import above, framed, text, to_text

    print(to_text(framed(above(text("hello"), text("box")))))
"""

from .core import Grid, empty, fill, singleton, space, text
from .errors import (
    GridboxError,
    InvalidCharacter,
    InvalidDimension,
    IrregularGrid,
    StyleError,
)
from .layout import (
    ASCII,
    BORDER_STYLES,
    DOUBLE,
    LIGHT,
    ROUNDED,
    BorderStyle,
    ColumnAlign,
    RowAlign,
    StyleLoader,
    above,
    beside,
    framed,
    grid,
    hconcat,
    heighten,
    hsep,
    pad,
    pad_to,
    punctuate_h,
    punctuate_v,
    vconcat,
    vsep,
    widen,
)
from .logging_config import setup_logging
from .render import RenderedLines, render, to_text

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "empty",
    "fill",
    "singleton",
    "space",
    "text",
    "GridboxError",
    "InvalidCharacter",
    "InvalidDimension",
    "IrregularGrid",
    "StyleError",
    "ASCII",
    "BORDER_STYLES",
    "DOUBLE",
    "LIGHT",
    "ROUNDED",
    "BorderStyle",
    "ColumnAlign",
    "RowAlign",
    "StyleLoader",
    "above",
    "beside",
    "framed",
    "grid",
    "hconcat",
    "heighten",
    "hsep",
    "pad",
    "pad_to",
    "punctuate_h",
    "punctuate_v",
    "vconcat",
    "vsep",
    "widen",
    "setup_logging",
    "RenderedLines",
    "render",
    "to_text",
]
