"""Exceptions raised by gridbox."""


class GridboxError(Exception):
    """Base class for all gridbox errors."""


class InvalidDimension(GridboxError, ValueError):
    """A size argument is negative or smaller than the box it applies to."""


class IrregularGrid(GridboxError, ValueError):
    """Rows of a grid matrix have different lengths."""


class InvalidCharacter(GridboxError, ValueError):
    """A cell value is not a single character."""


class StyleError(GridboxError, ValueError):
    """A border style definition is malformed."""
