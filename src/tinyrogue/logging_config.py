"""Logging setup for the console game.

Records go to stderr so they never interleave with the map drawn on stdout.
``TINYROGUE_LOG_LEVEL`` overrides the level picked from ``-v`` flags.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

ENV_LOG_LEVEL = "TINYROGUE_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Per-turn and per-room chatter, only let through at DEBUG
CHATTY_LOGGERS = ("tinyrogue.engine", "tinyrogue.dungeon", "tinyrogue.game")


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def resolve_level(verbosity: int = 0, env: Optional[Mapping[str, str]] = None) -> int:
    """Pick the root level: a valid env override wins, else the ``-v`` count."""
    env = os.environ if env is None else env
    name = (env.get(ENV_LOG_LEVEL) or "").strip().upper()
    if name:
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
    return level_for_verbosity(verbosity)


def configure_logging(verbosity: int = 0, stream: Optional[TextIO] = None) -> int:
    """Configure the root logger and return the level it was set to."""
    level = resolve_level(verbosity)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
    logging.getLogger().setLevel(level)
    chatty_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
    return level
