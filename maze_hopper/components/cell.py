from dataclasses import dataclass, replace

from maze_hopper.types import Direction


@dataclass(frozen=True)
class Walls:
    """Four independent wall flags; ``True`` means the side is closed."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def has(self, side: Direction) -> bool:
        return getattr(self, _FIELD[side])

    def without(self, side: Direction) -> "Walls":
        return replace(self, **{_FIELD[side]: False})


_FIELD = {
    Direction.UP: "top",
    Direction.RIGHT: "right",
    Direction.DOWN: "bottom",
    Direction.LEFT: "left",
}


@dataclass(frozen=True)
class Cell:
    """A maze cell.

    Created fully walled; walls are removed only while the maze is carved.
    The generator keeps its ``visited`` bookkeeping outside the cell.

    Attributes:
        x: Column index.
        y: Row index.
        walls: Closed sides of the cell.
    """

    x: int
    y: int
    walls: Walls = Walls()

    def has_wall(self, side: Direction) -> bool:
        return self.walls.has(side)
