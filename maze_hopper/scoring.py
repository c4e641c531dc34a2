"""Score formula and in-memory history helpers.

Score rewards finishing close to par, quickly::

    score = optimal_moves / (moves * seconds) * score_multiplier

The helpers below work on plain sequences of :class:`ScoreRecord`; storing
the history anywhere is the host's business.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from maze_hopper.config import DEFAULT_CONFIG, EngineConfig


@dataclass(frozen=True)
class ScoreRecord:
    """One finished game.

    Attributes:
        level: Challenge level id.
        time_ms: Elapsed time in milliseconds.
        moves: Hops taken.
        score: Value of :func:`calculate_score`.
        timestamp: Host-supplied completion time (any monotonic unit).
    """

    level: str
    time_ms: float
    moves: int
    score: float
    timestamp: float


def calculate_score(
    time_ms: float,
    moves: int,
    optimal_moves: int,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Score of a finished run, scaled by ``config.score_multiplier``."""
    if moves <= 0:
        raise ValueError(f"moves must be positive, got {moves}")
    if time_ms <= 0:
        raise ValueError(f"time_ms must be positive, got {time_ms}")
    seconds = time_ms / 1000
    return optimal_moves / (moves * seconds) * config.score_multiplier


def efficiency(moves: int, optimal_moves: int) -> float:
    """Par over actual moves, as a percentage (100.0 means a perfect run)."""
    if moves <= 0:
        raise ValueError(f"moves must be positive, got {moves}")
    return optimal_moves / moves * 100


def make_record(
    level: str,
    time_ms: float,
    moves: int,
    optimal_moves: int,
    timestamp: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScoreRecord:
    return ScoreRecord(
        level=level,
        time_ms=time_ms,
        moves=moves,
        score=calculate_score(time_ms, moves, optimal_moves, config),
        timestamp=timestamp,
    )


def add_score(
    history: Sequence[ScoreRecord],
    record: ScoreRecord,
    config: EngineConfig = DEFAULT_CONFIG,
) -> List[ScoreRecord]:
    """Append ``record``, keeping the newest ``config.history_limit`` records of its level.

    Records of other levels are left untouched and keep their order.
    """
    limit = config.history_limit
    updated = [*history, record]
    level_records = [r for r in updated if r.level == record.level]
    if len(level_records) <= limit:
        return updated
    others = [r for r in updated if r.level != record.level]
    newest = sorted(level_records, key=lambda r: r.timestamp, reverse=True)[:limit]
    return others + newest


def best_score(history: Sequence[ScoreRecord], level: str) -> Optional[float]:
    scores = [r.score for r in history if r.level == level]
    return max(scores) if scores else None


def level_scores(history: Sequence[ScoreRecord], level: str) -> List[ScoreRecord]:
    """Records for ``level``, best first."""
    return sorted((r for r in history if r.level == level), key=lambda r: r.score, reverse=True)
