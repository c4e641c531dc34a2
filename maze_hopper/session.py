"""Movement session state machine.

The session turns a stream of directional intents into discrete hops. It is
modeled the same way as the rest of the engine: a frozen
:class:`SessionState` value and pure reducer functions that return a *new*
state. :class:`MovementSession` wraps those reducers for hosts that want an
owning object with event listeners.

Phases:

* ``IDLE``: no jump in flight; queued intents may be drained.
* ``RESOLVING``: a batch of hops was resolved and the host is animating it.
  Intents submitted now are queued and drained once the host calls
  :func:`end_jump` (animation finished or cancelled).

The logical position always moves atomically when an intent is resolved;
animation timing and easing belong to the host.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from pyrsistent import pdeque
from pyrsistent.typing import PDeque

from maze_hopper.components import Position
from maze_hopper.config import DEFAULT_CONFIG, EngineConfig
from maze_hopper.errors import OutOfBounds
from maze_hopper.grid import Grid
from maze_hopper.intersections import next_intersection
from maze_hopper.types import Direction, PositionChangedFn, SessionPhase, WonFn

logger = logging.getLogger(__name__)

Changes = Tuple[Position, ...]


@dataclass(frozen=True)
class SessionState:
    """Immutable movement session snapshot.

    Attributes:
        grid (Grid): Maze being played (read-only).
        position (Position): Current player position.
        goal (Position): Winning position.
        capacity (int): Maximum number of pending intents.
        queue (PDeque[Direction]): Pending intents, oldest on the left.
        phase (SessionPhase): ``IDLE`` or ``RESOLVING``.
        won (bool): Terminal flag; set once the player lands on ``goal``.
        moves (int): Hops taken since the last reset.
    """

    grid: Grid
    position: Position
    goal: Position
    capacity: int = DEFAULT_CONFIG.queue_capacity
    queue: PDeque[Direction] = pdeque()
    phase: SessionPhase = SessionPhase.IDLE
    won: bool = False
    moves: int = 0


def _check_position(grid: Grid, pos: Position) -> None:
    if not grid.contains(pos):
        raise OutOfBounds(pos.x, pos.y, grid.width, grid.height)


def create_session(
    grid: Grid,
    start: Position,
    goal: Position,
    capacity: int = DEFAULT_CONFIG.queue_capacity,
) -> SessionState:
    """Fresh idle session at ``start``.

    Raises:
        OutOfBounds: If ``start`` or ``goal`` lies outside ``grid``.
        ValueError: If ``capacity`` is below 1.
    """
    if capacity < 1:
        raise ValueError(f"Queue capacity must be >= 1, got {capacity}")
    _check_position(grid, start)
    _check_position(grid, goal)
    return SessionState(grid=grid, position=start, goal=goal, capacity=capacity)


def submit_intent(state: SessionState, direction: Union[Direction, str]) -> SessionState:
    """Queue an intent.

    Intents beyond ``capacity`` and intents arriving after a win are dropped
    silently.
    """
    direction = Direction(direction)
    if state.won:
        logger.debug("Dropped intent %s: session already won", direction)
        return state
    if len(state.queue) >= state.capacity:
        logger.debug("Dropped intent %s: queue full (%d)", direction, state.capacity)
        return state
    return replace(state, queue=state.queue.append(direction))


def drain_and_resolve(state: SessionState) -> Tuple[SessionState, Changes]:
    """Resolve every queued intent in one pass.

    Each intent is resolved from the position left by the previous one.
    Blocked intents are discarded without counting a move. A hop landing on
    the goal wins the session and discards the rest of the queue.

    Returns:
        Tuple[SessionState, Changes]: The new state and the positions reached,
        in order. The phase becomes ``RESOLVING`` if any hop happened.
    """
    if state.phase != SessionPhase.IDLE or state.won or not state.queue:
        return state, ()

    queue = state.queue
    position = state.position
    changes: List[Position] = []
    won = False

    while queue:
        direction = queue.left
        queue = queue.popleft()
        landing = next_intersection(state.grid, position, direction)
        if landing == position:
            continue
        position = landing
        changes.append(position)
        if position == state.goal:
            won = True
            queue = pdeque()
            logger.debug("Goal %s reached after %d moves", position, state.moves + len(changes))
            break

    return (
        replace(
            state,
            queue=queue,
            position=position,
            moves=state.moves + len(changes),
            won=won,
            phase=SessionPhase.RESOLVING if changes else SessionPhase.IDLE,
        ),
        tuple(changes),
    )


def end_jump(state: SessionState) -> SessionState:
    """Return to ``IDLE`` after the host finished (or cancelled) animating."""
    if state.phase == SessionPhase.IDLE:
        return state
    return replace(state, phase=SessionPhase.IDLE)


def reset(state: SessionState, grid: Grid, start: Position, goal: Position) -> SessionState:
    """Start over on ``grid``: empty queue, ``IDLE``, not won, zero moves."""
    return create_session(grid, start, goal, capacity=state.capacity)


class MovementSession:
    """Owning wrapper around :class:`SessionState` with event listeners.

    ``submit_intent`` and ``complete_jump`` are serialized with a lock so the
    queue stays FIFO and at most one batch is resolved at a time. Listeners
    run after the lock is released, in registration order; their exceptions
    propagate to the caller.
    """

    def __init__(
        self,
        grid: Grid,
        start: Position,
        goal: Position,
        config: EngineConfig = DEFAULT_CONFIG,
    ) -> None:
        self._lock = threading.Lock()
        self._state = create_session(grid, start, goal, capacity=config.queue_capacity)
        self._position_listeners: List[PositionChangedFn] = []
        self._won_listeners: List[WonFn] = []

    # -------- Listeners --------

    def on_position_changed(self, fn: PositionChangedFn) -> PositionChangedFn:
        self._position_listeners.append(fn)
        return fn

    def on_won(self, fn: WonFn) -> WonFn:
        self._won_listeners.append(fn)
        return fn

    # -------- State --------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def position(self) -> Position:
        return self._state.position

    @property
    def goal(self) -> Position:
        return self._state.goal

    @property
    def won(self) -> bool:
        return self._state.won

    @property
    def moves(self) -> int:
        return self._state.moves

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def pending(self) -> Tuple[Direction, ...]:
        return tuple(self._state.queue)

    # -------- Transitions --------

    def submit_intent(self, direction: Union[Direction, str]) -> Changes:
        """Queue ``direction`` and, if idle, resolve the queue immediately."""
        with self._lock:
            before = self._state
            state = submit_intent(before, direction)
            state, changes = drain_and_resolve(state)
            self._state = state
        self._dispatch(before, state, changes)
        return changes

    def complete_jump(self) -> Changes:
        """Mark the in-flight jump finished or cancelled and drain what queued meanwhile."""
        with self._lock:
            before = self._state
            state, changes = drain_and_resolve(end_jump(before))
            self._state = state
        self._dispatch(before, state, changes)
        return changes

    def reset(self, grid: Grid, start: Position, goal: Optional[Position] = None) -> None:
        """Start over on ``grid`` (keeping the current goal if none is given)."""
        with self._lock:
            self._state = reset(
                self._state, grid, start, self._state.goal if goal is None else goal
            )

    def _dispatch(self, before: SessionState, after: SessionState, changes: Changes) -> None:
        for pos in changes:
            for fn in self._position_listeners:
                fn(pos)
        if after.won and not before.won:
            for won_fn in self._won_listeners:
                won_fn()
