"""Engine configuration.

A single frozen :class:`EngineConfig` carries the tunables shared by the
session, level builder and scoring helpers. Hosts construct it directly or
read it from ``MAZE_HOPPER_*`` environment variables via
:meth:`EngineConfig.from_env`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

ENV_PREFIX = "MAZE_HOPPER_"


@dataclass(frozen=True)
class EngineConfig:
    """Engine tunables.

    Attributes:
        queue_capacity: Maximum pending intents in a movement session.
        default_width: Maze width used when no challenge level is given.
        default_height: Maze height used when no challenge level is given.
        history_limit: Scores kept per level by :func:`maze_hopper.scoring.add_score`.
        score_multiplier: Scale factor applied to the raw score ratio.
    """

    queue_capacity: int = 5
    default_width: int = 15
    default_height: int = 10
    history_limit: int = 100
    score_multiplier: int = 10_000

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{f.name} must be a positive integer, got {value!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
        """Build a config, overriding defaults with ``MAZE_HOPPER_<FIELD>`` variables."""
        env = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            try:
                overrides[f.name] = int(raw)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from None
        return cls(**overrides)


DEFAULT_CONFIG = EngineConfig()
