"""Grid model.

The :class:`Grid` is the immutable maze value shared by the locator, the
shortest-path engine and the movement session. Cells are stored in a flat
``pyrsistent.PVector`` arena indexed by ``y * width + x``; no reader ever
mutates it, so a grid can be handed to any number of concurrent queries.

Wall removal is the only mutation in the model. It happens on the plain list
the generator carves (:func:`remove_wall`) before the arena is frozen, or as a
copy-on-write edit through :meth:`Grid.without_wall`.
"""

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Sequence, Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from maze_hopper.components import Cell, Position, Walls
from maze_hopper.errors import InvalidDimensions, OutOfBounds
from maze_hopper.types import DIRECTIONS, Direction, Side


def check_dimensions(width: int, height: int) -> None:
    """Raise :class:`InvalidDimensions` unless both extents are at least 1."""
    if width < 1 or height < 1:
        raise InvalidDimensions(width, height)


def cell_index(x: int, y: int, width: int) -> int:
    return y * width + x


def closed_cells(width: int, height: int) -> List[Cell]:
    """Fully walled working arena, row-major."""
    return [Cell(x, y) for y in range(height) for x in range(width)]


def remove_wall(cells: List[Cell], width: int, a: int, b: int) -> None:
    """Open the wall shared by the cells at flat indices ``a`` and ``b``.

    Both sides are cleared so walls stay symmetric. The cells must be grid
    neighbors.
    """
    cell_a, cell_b = cells[a], cells[b]
    side = _side_towards(cell_a, cell_b)
    cells[a] = replace(cell_a, walls=cell_a.walls.without(side))
    cells[b] = replace(cell_b, walls=cell_b.walls.without(side.opposite))


def _side_towards(a: Cell, b: Cell) -> Direction:
    delta = (b.x - a.x, b.y - a.y)
    for direction in DIRECTIONS:
        if direction.delta == delta:
            return direction
    raise ValueError(f"Cells {(a.x, a.y)} and {(b.x, b.y)} are not adjacent")


@dataclass(frozen=True)
class Grid:
    """Immutable maze grid.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[Cell]): Row-major cell arena of length ``width * height``.

    Construction rejects cells stored at an index other than their own
    coordinates, and facing wall flags that disagree.
    """

    width: int
    height: int
    cells: PVector[Cell]

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Grid {self.width}x{self.height} needs {self.width * self.height} cells, "
                f"got {len(self.cells)}"
            )
        for index, cell in enumerate(self.cells):
            if cell_index(cell.x, cell.y, self.width) != index or not self.in_bounds(
                cell.x, cell.y
            ):
                raise ValueError(
                    f"Cell {(cell.x, cell.y)} stored at index {index} of a "
                    f"{self.width}x{self.height} grid"
                )
            if cell.x + 1 < self.width:
                right = self.cells[index + 1]
                if cell.walls.right != right.walls.left:
                    raise ValueError(
                        f"Asymmetric wall between {(cell.x, cell.y)} and {(right.x, right.y)}"
                    )
            if cell.y + 1 < self.height:
                below = self.cells[index + self.width]
                if cell.walls.bottom != below.walls.top:
                    raise ValueError(
                        f"Asymmetric wall between {(cell.x, cell.y)} and {(below.x, below.y)}"
                    )

    # -------- Construction --------

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Sequence[Cell]) -> "Grid":
        return cls(width=width, height=height, cells=pvector(cells))

    @classmethod
    def closed(cls, width: int, height: int) -> "Grid":
        """Grid with every wall in place (no cell reachable from another)."""
        check_dimensions(width, height)
        return cls.from_cells(width, height, closed_cells(width, height))

    @classmethod
    def fully_open(cls, width: int, height: int) -> "Grid":
        """Grid with every internal wall removed; the border stays walled."""
        check_dimensions(width, height)
        cells = closed_cells(width, height)
        for y in range(height):
            for x in range(width):
                if x + 1 < width:
                    remove_wall(cells, width, cell_index(x, y, width), cell_index(x + 1, y, width))
                if y + 1 < height:
                    remove_wall(cells, width, cell_index(x, y, width), cell_index(x, y + 1, width))
        return cls.from_cells(width, height, cells)

    @classmethod
    def from_pattern(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from rows of ``.`` (open) and ``#`` (solid) characters.

        An open cell is walled toward the border and toward solid neighbors;
        a solid cell is walled on every side, which also keeps walls
        symmetric between an open cell and its solid neighbor.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        check_dimensions(width, height)
        if any(len(row) != width for row in rows):
            raise ValueError("Pattern rows must all have the same length")

        def is_floor(x: int, y: int) -> bool:
            return 0 <= x < width and 0 <= y < height and rows[y][x] == "."

        cells: List[Cell] = []
        for y in range(height):
            for x in range(width):
                if not is_floor(x, y):
                    cells.append(Cell(x, y))
                    continue
                walls = Walls(
                    top=not is_floor(x, y - 1),
                    right=not is_floor(x + 1, y),
                    bottom=not is_floor(x, y + 1),
                    left=not is_floor(x - 1, y),
                )
                cells.append(Cell(x, y, walls))
        return cls.from_cells(width, height, cells)

    # -------- Access --------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contains(self, pos: Position) -> bool:
        return self.in_bounds(pos.x, pos.y)

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raises :class:`OutOfBounds` outside the grid."""
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.cells[cell_index(x, y, self.width)]

    def cell(self, pos: Position) -> Cell:
        return self.cell_at(pos.x, pos.y)

    def neighbor(self, pos: Position, side: Direction) -> Optional[Position]:
        """In-bounds neighbor of ``pos`` across ``side`` (walls ignored)."""
        candidate = pos.step(side)
        return candidate if self.contains(candidate) else None

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    # -------- Copy-on-write editing --------

    def without_wall(self, a: Position, b: Position) -> "Grid":
        """Return a copy of this grid with the wall between ``a`` and ``b`` removed."""
        for pos in (a, b):
            if not self.contains(pos):
                raise OutOfBounds(pos.x, pos.y, self.width, self.height)
        cells = list(self.cells)
        remove_wall(
            cells,
            self.width,
            cell_index(a.x, a.y, self.width),
            cell_index(b.x, b.y, self.width),
        )
        return Grid.from_cells(self.width, self.height, cells)


def is_open(grid: Grid, cell: Cell, side: Union[Side, str]) -> bool:
    """True if ``cell`` has no wall on ``side`` and a neighbor exists there."""
    side = Direction(side)
    if cell.has_wall(side):
        return False
    dx, dy = side.delta
    return grid.in_bounds(cell.x + dx, cell.y + dy)


def open_sides(grid: Grid, pos: Position) -> List[Direction]:
    cell = grid.cell(pos)
    return [side for side in DIRECTIONS if is_open(grid, cell, side)]


def degree(grid: Grid, pos: Position) -> int:
    """Number of open, in-bounds sides of the cell at ``pos``."""
    return len(open_sides(grid, pos))


def removed_wall_pairs(grid: Grid) -> int:
    """Count internal wall pairs that have been removed.

    Each pair is counted once, from its left or top cell.
    """
    count = 0
    for cell in grid.cells:
        if is_open(grid, cell, Direction.RIGHT):
            count += 1
        if is_open(grid, cell, Direction.DOWN):
            count += 1
    return count
