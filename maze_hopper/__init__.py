"""maze_hopper
============

Maze engine for an intersection-hopping maze game: perfect maze generation,
corridor-collapsing movement and par computation by breadth-first search.

Common entry points are re-exported here::

    from maze_hopper import generate, optimal_moves, Position

    grid = generate(15, 10, seed=42)
    par = optimal_moves(grid, Position(0, 0), Position(14, 9))
"""

from .components import Cell, Position, Walls
from .config import EngineConfig
from .errors import InvalidDimensions, MazeError, OutOfBounds, UnknownLevel
from .game import MazeGame
from .generator import generate
from .grid import Grid, degree, is_open
from .intersections import classify, next_intersection, reachable_intersections
from .levels import CHALLENGE_LEVELS, ChallengeLevel, Level, build_level, get_level
from .pathfinding import optimal_moves, optimal_path
from .session import MovementSession, SessionState
from .types import Direction, IntersectionKind, SessionPhase

__all__ = [
    "CHALLENGE_LEVELS",
    "Cell",
    "ChallengeLevel",
    "Direction",
    "EngineConfig",
    "Grid",
    "IntersectionKind",
    "InvalidDimensions",
    "Level",
    "MazeError",
    "MazeGame",
    "MovementSession",
    "OutOfBounds",
    "Position",
    "SessionPhase",
    "SessionState",
    "UnknownLevel",
    "Walls",
    "build_level",
    "classify",
    "degree",
    "generate",
    "get_level",
    "is_open",
    "next_intersection",
    "optimal_moves",
    "optimal_path",
    "reachable_intersections",
]
