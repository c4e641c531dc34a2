"""maze_hopper.components
=========================

Aggregate import surface for the value objects shared by every engine
module::

    from maze_hopper.components import Cell, Position, Walls

All classes here are frozen ``@dataclass`` values with no behavior beyond
small conveniences; grid-level rules live in :mod:`maze_hopper.grid`.
"""

from .cell import Cell, Walls
from .position import Position

__all__ = [
    "Cell",
    "Position",
    "Walls",
]
