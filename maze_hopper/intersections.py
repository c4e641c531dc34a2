"""Intersection locator.

Implements the "intersection hopping" movement model: a directional intent
carries the player along a corridor in a single jump, stopping at the first
decision point. A hop ends when

* the cell just entered is a dead end or a junction (degree != 2), or
* the run cannot continue straight (wall or border), which includes bends.

The locator is read-only over a :class:`~maze_hopper.grid.Grid`; the
shortest-path engine uses :func:`reachable_intersections` as the adjacency of
its search graph.
"""

from typing import List, Union

from maze_hopper.components import Position
from maze_hopper.errors import OutOfBounds
from maze_hopper.grid import Grid, degree, is_open
from maze_hopper.types import DIRECTIONS, Direction, IntersectionKind


def classify(grid: Grid, pos: Position) -> IntersectionKind:
    """Classify a cell by its open-side count."""
    n = degree(grid, pos)
    if n == 0:
        return IntersectionKind.ISOLATED
    if n == 1:
        return IntersectionKind.DEAD_END
    if n == 2:
        return IntersectionKind.CORRIDOR
    return IntersectionKind.JUNCTION


def is_stopping_point(grid: Grid, pos: Position) -> bool:
    return degree(grid, pos) != 2


def corridor_cells(
    grid: Grid, from_pos: Position, direction: Union[Direction, str]
) -> List[Position]:
    """Every cell crossed by a hop from ``from_pos``, in order.

    The start cell is excluded and the landing cell is last. An empty list
    means the direction is blocked.

    Raises:
        OutOfBounds: If ``from_pos`` lies outside the grid.
        ValueError: If ``direction`` is not one of ``up``, ``right``, ``down``, ``left``.
    """
    direction = Direction(direction)
    if not grid.contains(from_pos):
        raise OutOfBounds(from_pos.x, from_pos.y, grid.width, grid.height)

    crossed: List[Position] = []
    current = from_pos
    while is_open(grid, grid.cell(current), direction):
        current = current.step(direction)
        crossed.append(current)
        if is_stopping_point(grid, current):
            break
    return crossed


def next_intersection(
    grid: Grid, from_pos: Position, direction: Union[Direction, str]
) -> Position:
    """Landing cell of a hop from ``from_pos`` in ``direction``.

    Returns ``from_pos`` unchanged when the first step is blocked.
    """
    crossed = corridor_cells(grid, from_pos, direction)
    return crossed[-1] if crossed else from_pos


def reachable_intersections(grid: Grid, from_pos: Position) -> List[Position]:
    """Distinct landing cells of the four hops from ``from_pos``.

    Blocked directions are dropped, so the result holds 0 to 4 positions in
    up, right, down, left order.
    """
    reachable: List[Position] = []
    for direction in DIRECTIONS:
        landing = next_intersection(grid, from_pos, direction)
        if landing != from_pos:
            reachable.append(landing)
    return reachable
