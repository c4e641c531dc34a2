# tests/unit/test_intersections.py

import pytest
from typing import List, Tuple

from maze_hopper.errors import OutOfBounds
from maze_hopper.grid import Grid
from maze_hopper.intersections import (
    classify,
    corridor_cells,
    next_intersection,
    reachable_intersections,
)
from maze_hopper.types import Direction, IntersectionKind
from tests.test_utils import P, straight_corridor


@pytest.mark.parametrize(
    "rows, start, direction, expected",
    [
        # straight corridor collapses into a single hop
        (["....."], (0, 0), Direction.RIGHT, (4, 0)),
        (["....."], (4, 0), Direction.LEFT, (0, 0)),
        (["....."], (2, 0), Direction.RIGHT, (4, 0)),
        ([".", ".", ".", ".", "."], (0, 0), Direction.DOWN, (0, 4)),
        # blocked immediately
        (["....."], (0, 0), Direction.LEFT, (0, 0)),
        (["....."], (0, 0), Direction.UP, (0, 0)),
        (["..#"], (1, 0), Direction.RIGHT, (1, 0)),
        # stops at a T junction in the middle of a run
        ([".....", "##.##"], (0, 0), Direction.RIGHT, (2, 0)),
        # stops at a bend
        (["..", ".#"], (1, 0), Direction.LEFT, (0, 0)),
        ([".#", ".#", "..", "##"], (0, 0), Direction.DOWN, (0, 2)),
        # stops at a dead end
        (["..", ".#"], (0, 0), Direction.DOWN, (0, 1)),
    ],
)
def test_next_intersection(
    rows: List[str],
    start: Tuple[int, int],
    direction: Direction,
    expected: Tuple[int, int],
) -> None:
    grid = Grid.from_pattern(rows)
    assert next_intersection(grid, P(*start), direction) == P(*expected)


def test_fully_open_grid_hops_one_cell() -> None:
    grid = Grid.fully_open(4, 4)
    assert next_intersection(grid, P(0, 0), Direction.RIGHT) == P(1, 0)
    assert next_intersection(grid, P(1, 1), Direction.DOWN) == P(1, 2)
    # corner is a bend: entering it ends the hop at the border
    assert next_intersection(grid, P(2, 3), Direction.RIGHT) == P(3, 3)


def test_reachable_from_cross_center() -> None:
    grid = Grid.from_pattern(["#.#", "...", "#.#"])
    assert reachable_intersections(grid, P(1, 1)) == [P(1, 0), P(2, 1), P(1, 2), P(0, 1)]


def test_reachable_from_dead_end() -> None:
    grid = Grid.from_pattern([".#", ".#", "..", "##"])
    assert reachable_intersections(grid, P(0, 0)) == [P(0, 2)]


def test_reachable_from_corner_of_open_grid() -> None:
    grid = Grid.fully_open(4, 4)
    assert reachable_intersections(grid, P(0, 0)) == [P(1, 0), P(0, 1)]


def test_isolated_cell_has_no_reachable_intersections() -> None:
    assert reachable_intersections(Grid.closed(1, 1), P(0, 0)) == []
    assert reachable_intersections(Grid.closed(3, 3), P(1, 1)) == []


def test_corridor_cells_lists_crossed_cells() -> None:
    grid = straight_corridor(5)
    assert corridor_cells(grid, P(0, 0), Direction.RIGHT) == [
        P(1, 0),
        P(2, 0),
        P(3, 0),
        P(4, 0),
    ]
    assert corridor_cells(grid, P(0, 0), Direction.LEFT) == []


def test_out_of_bounds_origin_raises() -> None:
    grid = straight_corridor(5)
    with pytest.raises(OutOfBounds):
        next_intersection(grid, P(5, 0), Direction.LEFT)
    with pytest.raises(OutOfBounds):
        reachable_intersections(grid, P(0, -1))


@pytest.mark.parametrize(
    "rows, pos, kind",
    [
        (["."], (0, 0), IntersectionKind.ISOLATED),
        (["....."], (0, 0), IntersectionKind.DEAD_END),
        (["....."], (2, 0), IntersectionKind.CORRIDOR),
        (["#.#", "...", "#.#"], (1, 1), IntersectionKind.JUNCTION),
        ([".....", "##.##"], (2, 0), IntersectionKind.JUNCTION),
        (["..", ".#"], (0, 0), IntersectionKind.CORRIDOR),
    ],
)
def test_classify(rows: List[str], pos: Tuple[int, int], kind: IntersectionKind) -> None:
    assert classify(Grid.from_pattern(rows), P(*pos)) == kind


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((0, 0), "right", (4, 0)),
        ((4, 0), "left", (0, 0)),
        ((0, 0), "up", (0, 0)),
        ((0, 0), "left", (0, 0)),
    ],
)
def test_next_intersection_accepts_direction_names(
    start: Tuple[int, int], direction: str, expected: Tuple[int, int]
) -> None:
    grid = straight_corridor(5)
    assert next_intersection(grid, P(*start), direction) == P(*expected)
    assert next_intersection(grid, P(*start), direction) == next_intersection(
        grid, P(*start), Direction(direction)
    )


def test_corridor_cells_accepts_direction_names() -> None:
    grid = straight_corridor(3, vertical=True)
    assert corridor_cells(grid, P(0, 0), "down") == [P(0, 1), P(0, 2)]
    assert corridor_cells(grid, P(0, 0), "up") == []


def test_unknown_direction_name_raises() -> None:
    with pytest.raises(ValueError):
        next_intersection(straight_corridor(5), P(0, 0), "sideways")
