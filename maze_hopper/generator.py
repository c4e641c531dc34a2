"""Perfect maze generation.

Randomized depth-first backtracking ("recursive backtracker") carved with an
explicit stack of flat cell indices, so a 40x30 level never approaches the
interpreter's recursion limit. The produced :class:`~maze_hopper.grid.Grid`
is a spanning tree over the cell graph: every cell is visited exactly once
and each visit removes exactly one wall pair, ``width * height - 1`` in total.
"""

import logging
import random
from typing import List, Optional

from maze_hopper.grid import Grid, cell_index, check_dimensions, closed_cells, remove_wall

logger = logging.getLogger(__name__)


def unvisited_neighbors(
    index: int, visited: List[bool], width: int, height: int
) -> List[int]:
    """Flat indices of unvisited neighbors, scanned up, right, down, left."""
    x, y = index % width, index // width
    neighbors: List[int] = []
    if y > 0 and not visited[index - width]:
        neighbors.append(index - width)
    if x < width - 1 and not visited[index + 1]:
        neighbors.append(index + 1)
    if y < height - 1 and not visited[index + width]:
        neighbors.append(index + width)
    if x > 0 and not visited[index - 1]:
        neighbors.append(index - 1)
    return neighbors


def generate(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Grid:
    """Generate a perfect maze.

    Args:
        width (int): Number of columns, at least 1.
        height (int): Number of rows, at least 1.
        rng (random.Random | None): Random source. Takes precedence over ``seed``.
        seed (int | None): Seed for a fresh ``random.Random`` when ``rng`` is
            not given. The same seed always yields the same grid.

    Returns:
        Grid: Immutable spanning-tree maze.

    Raises:
        InvalidDimensions: If ``width`` or ``height`` is below 1.
    """
    check_dimensions(width, height)
    source = "injected rng" if rng is not None else f"seed={seed}"
    if rng is None:
        rng = random.Random(seed)

    cells = closed_cells(width, height)
    visited = [False] * (width * height)

    start = cell_index(0, 0, width)
    visited[start] = True
    stack: List[int] = [start]

    while stack:
        current = stack[-1]
        neighbors = unvisited_neighbors(current, visited, width, height)
        if neighbors:
            chosen = rng.choice(neighbors)
            remove_wall(cells, width, current, chosen)
            visited[chosen] = True
            stack.append(chosen)
        else:
            stack.pop()

    logger.debug("Generated %dx%d maze (%s)", width, height, source)
    return Grid.from_cells(width, height, cells)
