from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional

from ..engine.commands import Command

logger = logging.getLogger(__name__)


class KeyMapper:
    """Rebindable mapping from typed characters to turn commands.

    Keys are normalized case-insensitively. Anything unbound translates to
    Command.UNKNOWN so the resolver can report it without spending a turn.

    Example usage:
        mapper = KeyMapper.default()
        mapper.translate("w")   # -> Command.UP
        mapper.translate("x")   # -> Command.UNKNOWN
    """

    def __init__(self, bindings: Optional[Dict[str, Command]] = None) -> None:
        self._bindings: Dict[str, Command] = {}
        if bindings:
            for key, command in bindings.items():
                self.bind(key, command)

    @staticmethod
    def _normalize(key: str) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    def bind(self, key: str, command: Command) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = command

    def unbind(self, key: str) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def translate(self, key: str) -> Command:
        nk = self._normalize(key)
        if nk is None:
            return Command.UNKNOWN
        return self._bindings.get(nk, Command.UNKNOWN)

    @classmethod
    def default(cls) -> "KeyMapper":
        """WASD movement and Q to quit."""
        return cls(
            {
                "W": Command.UP,
                "S": Command.DOWN,
                "A": Command.LEFT,
                "D": Command.RIGHT,
                "Q": Command.QUIT,
            }
        )


def iter_keys(lines: Iterable[str]) -> Iterator[str]:
    """Yield every non-whitespace character of every line, one command each.

    Typing "ddw" then Enter therefore issues three moves.
    """
    for line in lines:
        for ch in line:
            if not ch.isspace():
                yield ch
