from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Capability producing uniform integers; the only randomness the core uses."""

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""


@dataclass
class SeededRandom:
    """
    Thin wrapper around random.Random to make RNG deterministic and injectable
    for tests while avoiding global state.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized SeededRandom with deterministic seed=%s", self.seed)
        else:
            logger.debug("Initialized SeededRandom with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)


@dataclass
class ScriptedRandom:
    """Replays a fixed sequence of values.

    Each value must lie inside the range requested by the caller, otherwise a
    ValueError is raised so a mis-scripted test fails loudly. Once the script
    is exhausted the lower bound of every request is returned.
    """

    values: Iterable[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._queue: List[int] = list(self.values)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def randint(self, a: int, b: int) -> int:
        if not self._queue:
            return a
        value = self._queue.pop(0)
        if not a <= value <= b:
            raise ValueError(f"Scripted value {value} outside requested range [{a}, {b}]")
        return value


__all__ = ["RandomSource", "SeededRandom", "ScriptedRandom"]
