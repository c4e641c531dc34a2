"""Shortest-path engine.

Breadth-first search over the *intersection graph*: nodes are landing cells
and edges are single hops as produced by
:func:`maze_hopper.intersections.reachable_intersections`. The graph is
unweighted, so the first time BFS discovers the goal its depth is the minimum
hop count ("par"), independent of neighbor expansion order.

Unreachable goals are a normal outcome (``-1`` / ``[]``), not an error.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

from maze_hopper.components import Position
from maze_hopper.errors import OutOfBounds
from maze_hopper.grid import Grid
from maze_hopper.intersections import reachable_intersections

logger = logging.getLogger(__name__)


def _search(grid: Grid, start: Position, end: Position) -> Optional[Dict[Position, Position]]:
    """Run BFS from ``start``; return parent pointers if ``end`` was found."""
    queue: deque[Position] = deque([start])
    prev: Dict[Position, Position] = {}
    visited: set[Position] = {start}

    while queue:
        pos = queue.popleft()
        for nxt in reachable_intersections(grid, pos):
            if nxt in visited:
                continue
            visited.add(nxt)
            prev[nxt] = pos
            if nxt == end:
                return prev
            queue.append(nxt)
    return None


def optimal_path(grid: Grid, start: Position, end: Position) -> List[Position]:
    """Shortest hop sequence from ``start`` to ``end``.

    Returns the landing cells including both endpoints, ``[start]`` when they
    are equal, or ``[]`` if ``end`` cannot be reached by hopping.

    Raises:
        OutOfBounds: If ``start`` lies outside the grid.
    """
    if not grid.contains(start):
        raise OutOfBounds(start.x, start.y, grid.width, grid.height)
    if start == end:
        return [start]

    prev = _search(grid, start, end)
    if prev is None:
        logger.debug("No hop path from %s to %s", start, end)
        return []

    path: List[Position] = [end]
    while path[-1] != start:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def optimal_moves(grid: Grid, start: Position, end: Position) -> int:
    """Minimum number of hops from ``start`` to ``end``; ``-1`` if unreachable."""
    return len(optimal_path(grid, start, end)) - 1
