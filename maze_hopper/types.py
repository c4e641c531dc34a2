"""Common type aliases and enumerations.

``Direction`` is the normalized intent vocabulary shared by the locator and
the movement session; it doubles as the wall side name on a cell.
"""

from enum import StrEnum, auto
from typing import Callable, Dict, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from maze_hopper.components import Position

Coord = Tuple[int, int]


class Direction(StrEnum):
    """Cardinal movement intent / wall side.

    Member order (up, right, down, left) is the canonical scan order used by
    generation and intersection lookup.
    """

    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()

    @property
    def delta(self) -> Coord:
        return DIRECTION_DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITE[self]


# Walls are named after the side they close, so a side *is* a direction.
Side = Direction

DIRECTIONS = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

DIRECTION_DELTAS: Dict[Direction, Coord] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


class IntersectionKind(StrEnum):
    """Classification of a cell by its number of open sides."""

    ISOLATED = auto()
    DEAD_END = auto()
    CORRIDOR = auto()
    JUNCTION = auto()


class SessionPhase(StrEnum):
    """Movement session phase: idle, or a resolved jump awaiting completion."""

    IDLE = auto()
    RESOLVING = auto()


PositionChangedFn = Callable[["Position"], None]
WonFn = Callable[[], None]
