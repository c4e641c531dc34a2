"""Logging helpers.

Engine modules log through ``logging.getLogger(__name__)`` and never install
handlers themselves. Hosts that want to see engine records call
:func:`configure_logging` once at startup.
"""

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "MAZE_HOPPER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Attach a stream handler to the ``maze_hopper`` logger.

    ``level`` falls back to ``$MAZE_HOPPER_LOG_LEVEL`` and then ``WARNING``.
    Calling this more than once does not add duplicate handlers.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = level.upper()

    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("maze_hopper")
    root.setLevel(level)
    if _handler not in root.handlers:
        root.addHandler(_handler)
    return root
