"""Challenge levels.

A :class:`ChallengeLevel` is the static description of a level (size and
labels). :func:`build_level` turns it into a playable :class:`Level`: a freshly
generated maze, start at the top-left corner, goal at the bottom-right corner
and the par hop count from the shortest-path engine.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from maze_hopper.components import Position
from maze_hopper.errors import UnknownLevel
from maze_hopper.generator import generate
from maze_hopper.grid import Grid, check_dimensions
from maze_hopper.pathfinding import optimal_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChallengeLevel:
    """Level descriptor shown in a level picker."""

    id: str
    name: str
    description: str
    width: int
    height: int

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)


@dataclass(frozen=True)
class Level:
    """A generated, playable level.

    Attributes:
        challenge: Descriptor this level was built from.
        grid: The maze.
        start: Player start position.
        goal: Winning position.
        par: Minimum number of hops from ``start`` to ``goal``.
        seed: Seed used for generation, if one was given.
    """

    challenge: ChallengeLevel
    grid: Grid
    start: Position
    goal: Position
    par: int
    seed: Optional[int] = None


CHALLENGE_LEVELS: List[ChallengeLevel] = [
    ChallengeLevel("tiny", "Tiny", "A quick warm-up maze.", 8, 6),
    ChallengeLevel("small", "Small", "Short corridors, few dead ends.", 12, 9),
    ChallengeLevel("classic", "Classic", "The standard maze.", 15, 10),
    ChallengeLevel("medium", "Medium", "Longer detours start to appear.", 20, 15),
    ChallengeLevel("large", "Large", "Plan ahead before you commit.", 30, 20),
    ChallengeLevel("huge", "Huge", "A marathon of intersections.", 40, 30),
]

_LEVELS_BY_ID: Dict[str, ChallengeLevel] = {level.id: level for level in CHALLENGE_LEVELS}


def get_level(level_id: str) -> ChallengeLevel:
    """Look up a catalog level by id; raises :class:`UnknownLevel`."""
    try:
        return _LEVELS_BY_ID[level_id]
    except KeyError:
        raise UnknownLevel(level_id) from None


def build_level(
    challenge: ChallengeLevel,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Level:
    """Generate a maze for ``challenge`` and compute its par."""
    grid = generate(challenge.width, challenge.height, rng=rng, seed=seed)
    start = Position(0, 0)
    goal = Position(challenge.width - 1, challenge.height - 1)
    par = optimal_moves(grid, start, goal)
    logger.debug("Built level %s (seed=%s, par=%d)", challenge.id, seed, par)
    return Level(challenge=challenge, grid=grid, start=start, goal=goal, par=par, seed=seed)
