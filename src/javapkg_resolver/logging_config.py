import os
import sys
from typing import Optional

from loguru import logger

LOG_LEVEL_ENV = "JAVAPKG_LOG_LEVEL"

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"

# Handler installed by setup_logging, replaced on reconfiguration
_handler_id: Optional[int] = None


def setup_logging(level: Optional[str] = None) -> str:
    """
    Configures the global logger with a single stderr sink.

    Calling it again replaces the previous sink, so the CLI can change the
    level per invocation.

    Args:
        level: Logging level. Defaults to $JAVAPKG_LOG_LEVEL, then WARNING.

    Returns:
        The level that was applied.
    """
    global _handler_id

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    level = level.upper()

    if _handler_id is None:
        # Drop loguru's default DEBUG handler the first time round
        logger.remove()
    else:
        logger.remove(_handler_id)

    # sys.stderr is looked up per message; test runners swap it out
    _handler_id = logger.add(
        lambda message: sys.stderr.write(message),
        level=level,
        format=LOG_FORMAT,
        colorize=False,
    )
    return level
