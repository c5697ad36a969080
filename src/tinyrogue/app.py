from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional

from .config import Difficulty
from .engine.commands import Command
from .engine.turns import TurnResolver
from .input.mapping import KeyMapper, iter_keys
from .ui.text import format_event, render

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]

DIFFICULTY_PROMPT = "Choose difficulty: 1) Easy  2) Normal  3) Hard  : "
MOVE_PROMPT = "Enter move (w/a/s/d) or q to quit: "


def choose_difficulty(lines: Iterator[str], write: Writer) -> Optional[Difficulty]:
    """Ask for a preset; returns None when input ends before an answer."""
    write(DIFFICULTY_PROMPT)
    for line in lines:
        if line.strip():
            return Difficulty.from_menu_choice(line)
    return None


def run_session(
    resolver: TurnResolver,
    lines: Iterable[str],
    write: Writer,
    mapper: Optional[KeyMapper] = None,
) -> int:
    """Drive one session from text input until death, quit or end of input.

    Returns the final score. End of input is treated as quitting, so a beaten
    high score is still saved.
    """
    mapper = mapper or KeyMapper.default()
    keys = iter_keys(lines)
    write(render(resolver.snapshot()))
    while not resolver.ended:
        write(MOVE_PROMPT)
        key = next(keys, None)
        if key is None:
            write("\n")
            logger.debug("Input exhausted; quitting session")
            command = Command.QUIT
        else:
            command = mapper.translate(key)
        result = resolver.submit(command)
        write("\n")
        for event in result.events:
            msg = format_event(event)
            if msg:
                write(msg + "\n")
        write(render(resolver.snapshot()))

    snap = resolver.snapshot()
    write(f"Final score: {snap.score}   Turns: {snap.turns}   High score: {snap.high_score}\n")
    write("Thanks for playing!\n")
    return snap.score
