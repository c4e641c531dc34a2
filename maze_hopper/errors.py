"""Engine exceptions.

Both concrete errors also derive from the builtin they refine so callers may
catch ``ValueError`` / ``IndexError`` / ``KeyError`` as usual.
"""


class MazeError(Exception):
    """Base class for all maze engine errors."""


class InvalidDimensions(MazeError, ValueError):
    """Raised when a grid is requested with width or height below 1."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Invalid maze dimensions {width}x{height}: width and height must be >= 1"
        )
        self.width = width
        self.height = height


class OutOfBounds(MazeError, IndexError):
    """Raised on coordinate access outside the grid extents."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Out of bounds: {(x, y)} for grid {width}x{height}")
        self.x = x
        self.y = y


class UnknownLevel(MazeError, KeyError):
    """Raised when a challenge level id is not in the catalog."""

    def __init__(self, level_id: str) -> None:
        super().__init__(level_id)
        self.level_id = level_id

    def __str__(self) -> str:
        return f"Unknown challenge level: {self.level_id!r}"
