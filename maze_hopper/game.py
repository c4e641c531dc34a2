"""Game controller.

:class:`MazeGame` owns the "current maze" state that the engine modules are
deliberately free of: the active :class:`~maze_hopper.levels.Level` and the
:class:`~maze_hopper.session.MovementSession` playing it. A UI drives it with
``start`` / ``new_maze`` / ``restart`` and directional intents, and listens for
position and win events. Timing, scoring persistence and rendering stay with
the UI.

Usage::

    game = MazeGame()
    game.on_won(lambda: print("won in", game.moves, "par", game.par))
    game.start("classic", seed=7)
    game.submit_intent("right")
"""

import logging
from typing import List, Optional, Sequence, Union

from maze_hopper.components import Position
from maze_hopper.config import DEFAULT_CONFIG, EngineConfig
from maze_hopper.grid import Grid
from maze_hopper.levels import ChallengeLevel, Level, build_level, get_level
from maze_hopper.scoring import ScoreRecord, add_score, calculate_score, make_record
from maze_hopper.session import Changes, MovementSession
from maze_hopper.types import Direction, PositionChangedFn, WonFn

logger = logging.getLogger(__name__)


class MazeGame:
    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._level: Optional[Level] = None
        self._session: Optional[MovementSession] = None
        self._position_listeners: List[PositionChangedFn] = []
        self._won_listeners: List[WonFn] = []

    def on_position_changed(self, fn: PositionChangedFn) -> PositionChangedFn:
        self._position_listeners.append(fn)
        return fn

    def on_won(self, fn: WonFn) -> WonFn:
        self._won_listeners.append(fn)
        return fn

    # -------- Level lifecycle --------

    def start(
        self,
        level: Union[ChallengeLevel, str, None] = None,
        seed: Optional[int] = None,
    ) -> Level:
        """Generate a maze for ``level`` (catalog id, descriptor, or default size)."""
        if level is None:
            challenge = ChallengeLevel(
                "custom",
                "Custom",
                "Default-sized maze.",
                self.config.default_width,
                self.config.default_height,
            )
        elif isinstance(level, str):
            challenge = get_level(level)
        else:
            challenge = level
        return self._load(build_level(challenge, seed=seed))

    def new_maze(self, seed: Optional[int] = None) -> Level:
        """Regenerate the current challenge with a new maze."""
        return self._load(build_level(self.level.challenge, seed=seed))

    def restart(self) -> None:
        """Replay the current maze from its start position."""
        level = self.level
        self.session.reset(level.grid, level.start, level.goal)

    def _load(self, level: Level) -> Level:
        self._level = level
        if self._session is None:
            self._session = MovementSession(level.grid, level.start, level.goal, self.config)
            self._session.on_position_changed(self._emit_position_changed)
            self._session.on_won(self._emit_won)
        else:
            self._session.reset(level.grid, level.start, level.goal)
        logger.info(
            "Started %s %dx%d (par %d)",
            level.challenge.id,
            level.grid.width,
            level.grid.height,
            level.par,
        )
        return level

    # -------- Play --------

    def submit_intent(self, direction: Union[Direction, str]) -> Changes:
        return self.session.submit_intent(direction)

    def complete_jump(self) -> Changes:
        return self.session.complete_jump()

    # -------- Scoring --------

    def score(self, time_ms: float) -> float:
        """Score of the finished run on the current maze, using this game's config."""
        return calculate_score(time_ms, self._finished_moves(), self.par, self.config)

    def record(
        self, history: Sequence[ScoreRecord], time_ms: float, timestamp: float
    ) -> List[ScoreRecord]:
        """Add the finished run to ``history``, trimmed to ``config.history_limit``."""
        record = make_record(
            self.level.challenge.id,
            time_ms,
            self._finished_moves(),
            self.par,
            timestamp,
            self.config,
        )
        return add_score(history, record, self.config)

    def _finished_moves(self) -> int:
        if not self.won:
            raise RuntimeError("Maze not finished; scores exist only for won runs")
        return self.moves

    # -------- State --------

    @property
    def level(self) -> Level:
        if self._level is None:
            raise RuntimeError("No level started; call start() first")
        return self._level

    @property
    def session(self) -> MovementSession:
        if self._session is None:
            raise RuntimeError("No level started; call start() first")
        return self._session

    @property
    def grid(self) -> Grid:
        return self.level.grid

    @property
    def par(self) -> int:
        return self.level.par

    @property
    def goal(self) -> Position:
        return self.level.goal

    @property
    def position(self) -> Position:
        return self.session.position

    @property
    def moves(self) -> int:
        return self.session.moves

    @property
    def won(self) -> bool:
        return self.session.won

    def _emit_position_changed(self, pos: Position) -> None:
        for fn in self._position_listeners:
            fn(pos)

    def _emit_won(self) -> None:
        logger.info("Won %s in %d moves (par %d)", self.level.challenge.id, self.moves, self.par)
        for fn in self._won_listeners:
            fn()
