"""Exceptions raised by the maze core."""


class MazeError(ValueError):
    """Base class for caller misuse of the maze core."""


class InvalidDimensions(MazeError):
    """Grid dimensions are not positive, or the cell set is empty."""


class InvalidOption(MazeError):
    """An algorithm parameter or lookup name is out of range or unknown."""


class InvalidCell(MazeError):
    """A coordinate is negative or does not exist in the grid."""
