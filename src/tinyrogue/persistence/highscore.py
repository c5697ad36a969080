from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "tinyrogue"
HIGHSCORE_FILENAME = "highscore.txt"

# Environment variable override (useful for tests and portable installs)
ENV_HIGHSCORE_FILE = "TINYROGUE_HIGHSCORE_FILE"


class HighScoreRepository(Protocol):
    def load(self) -> int:
        """Return the stored best score, or 0 when none can be read."""

    def save(self, score: int) -> bool:
        """Persist ``score``; return False instead of raising on I/O failure."""


def default_highscore_path() -> Path:
    """Resolve the high score file location.

    TINYROGUE_HIGHSCORE_FILE wins when set; otherwise the file lives in the
    platform user data directory (e.g. ~/.local/share/tinyrogue on Linux).
    """
    override = os.getenv(ENV_HIGHSCORE_FILE)
    if override:
        return Path(override).expanduser()
    return Path(user_data_dir(APP_NAME, appauthor=False)) / HIGHSCORE_FILENAME


class HighScoreStore:
    """Reads and writes the single best-score integer as a plain text file.

    Shared by every difficulty. Read failures degrade to 0; write failures are
    logged and reported through the return value so the session carries on.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or default_highscore_path()

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No high score file at %s", self.path)
            return 0
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        tokens = text.split()
        if not tokens:
            return 0
        try:
            return int(tokens[0])
        except ValueError:
            logger.warning("Ignoring unreadable high score in %s: %r", self.path, tokens[0])
            return 0

    def save(self, score: int) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(f"{score}\n", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write high score to %s: %s", self.path, exc)
            return False
        logger.info("Saved high score %d to %s", score, self.path)
        return True
