"""Position component.

Immutable integer grid coordinates used for the player, the goal and every
intersection result. Plain value; not owned by any entity.
"""

from dataclasses import dataclass

from maze_hopper.types import Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)
