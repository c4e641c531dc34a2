# tests/unit/test_pathfinding.py

import pytest
from typing import List, Tuple

from maze_hopper.errors import OutOfBounds
from maze_hopper.generator import generate
from maze_hopper.grid import Grid
from maze_hopper.intersections import reachable_intersections
from maze_hopper.pathfinding import optimal_moves, optimal_path
from tests.test_utils import P, glue_horizontally, straight_corridor

COMPLEX = [
    "...#.",
    ".#...",
    "...#.",
    ".#...",
    ".....",
]

SPLIT = [
    "..#..",
    "..#..",
    "#####",
    "..#..",
    "..#..",
]


@pytest.mark.parametrize(
    "rows, start, end, expected",
    [
        (["..."], (0, 0), (2, 0), 1),
        (["....."], (0, 0), (4, 0), 1),
        ([".", ".", ".", ".", "."], (0, 0), (0, 4), 1),
        (["..#", "...", "###"], (0, 0), (2, 1), 3),
        (COMPLEX, (0, 0), (4, 4), 5),
        (["....", "....", "....", "...."], (0, 0), (3, 3), 6),
        (["....", "....", "....", "...."], (3, 0), (0, 3), 6),
    ],
)
def test_optimal_moves(
    rows: List[str], start: Tuple[int, int], end: Tuple[int, int], expected: int
) -> None:
    grid = Grid.from_pattern(rows)
    assert optimal_moves(grid, P(*start), P(*end)) == expected


def test_fully_open_grid_costs_manhattan_distance() -> None:
    # Every border and interior cell of an open grid is a junction, so each
    # hop advances one cell.
    grid = Grid.fully_open(4, 4)
    assert optimal_moves(grid, P(0, 0), P(3, 3)) == 6
    path = optimal_path(grid, P(0, 0), P(3, 3))
    assert len(path) == 7


def test_corridor_collapses_to_one_move() -> None:
    grid = straight_corridor(5)
    assert optimal_moves(grid, P(0, 0), P(4, 0)) == 1
    assert optimal_path(grid, P(0, 0), P(4, 0)) == [P(0, 0), P(4, 0)]


def test_mid_corridor_cell_is_not_a_landing() -> None:
    grid = straight_corridor(5)
    assert optimal_moves(grid, P(0, 0), P(2, 0)) == -1
    assert optimal_path(grid, P(0, 0), P(2, 0)) == []
    # but it is a valid start
    assert optimal_moves(grid, P(2, 0), P(0, 0)) == 1


def test_same_start_and_end() -> None:
    grid = generate(8, 6, seed=42)
    for pos in grid.positions():
        assert optimal_moves(grid, pos, pos) == 0
        assert optimal_path(grid, pos, pos) == [pos]


def test_unreachable_split_pattern() -> None:
    grid = Grid.from_pattern(SPLIT)
    assert optimal_moves(grid, P(0, 0), P(4, 4)) == -1
    assert optimal_path(grid, P(0, 0), P(4, 4)) == []


def test_unreachable_glued_grids() -> None:
    grid = glue_horizontally(generate(4, 4, seed=1), generate(4, 4, seed=2))
    assert optimal_moves(grid, P(0, 0), P(7, 3)) == -1
    assert optimal_path(grid, P(0, 0), P(7, 3)) == []
    # each half is still internally connected
    assert optimal_moves(grid, P(0, 0), P(3, 3)) > 0
    assert optimal_moves(grid, P(4, 0), P(7, 3)) > 0


def test_out_of_bounds() -> None:
    grid = straight_corridor(5)
    assert optimal_moves(grid, P(0, 0), P(9, 9)) == -1
    with pytest.raises(OutOfBounds):
        optimal_moves(grid, P(-1, 0), P(4, 0))
    with pytest.raises(OutOfBounds):
        optimal_path(grid, P(9, 9), P(9, 9))


def test_complex_path_shape() -> None:
    grid = Grid.from_pattern(COMPLEX)
    path = optimal_path(grid, P(0, 0), P(4, 4))
    assert path[0] == P(0, 0)
    assert path[-1] == P(4, 4)
    assert len(path) == optimal_moves(grid, P(0, 0), P(4, 4)) + 1


@pytest.mark.parametrize("width, height", [(8, 6), (15, 10), (40, 30)])
@pytest.mark.parametrize("seed", range(5))
def test_path_consistency_on_generated_mazes(width: int, height: int, seed: int) -> None:
    grid = generate(width, height, seed=seed)
    start, goal = P(0, 0), P(width - 1, height - 1)
    moves = optimal_moves(grid, start, goal)
    path = optimal_path(grid, start, goal)
    assert moves > 0
    assert len(path) == moves + 1
    assert path[0] == start and path[-1] == goal
    for here, there in zip(path, path[1:]):
        assert there in reachable_intersections(grid, here)
    assert len(set(path)) == len(path)
