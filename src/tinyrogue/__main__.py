from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .app import choose_difficulty, run_session
from .config import Difficulty, Settings
from .engine.turns import TurnResolver
from .errors import ConfigError
from .logging_config import configure_logging
from .persistence.highscore import HighScoreStore
from .rng import SeededRandom

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinyrogue",
        description="Tiny turn-based roguelike played in the terminal",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Skip the difficulty prompt",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible maps and rolls")
    parser.add_argument("--config", type=Path, default=None, help="YAML file merged over the default settings")
    parser.add_argument("--highscore-file", type=Path, default=None, help="Where the best score is kept")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    lines = iter(sys.stdin)
    write = sys.stdout.write
    try:
        settings = Settings.load(args.config)
        if args.difficulty is not None:
            difficulty = Difficulty.parse(args.difficulty)
        else:
            chosen = choose_difficulty(lines, write)
            if chosen is None:
                return 0
            difficulty = chosen
        resolver = TurnResolver.new_session(
            settings,
            difficulty,
            SeededRandom(args.seed),
            high_scores=HighScoreStore(args.highscore_file),
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logger.debug("Starting %s session", difficulty.label)
    run_session(resolver, lines, write)
    return 0


if __name__ == "__main__":
    sys.exit(main())
