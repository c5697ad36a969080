from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple


class TurnPhase(Enum):
    AWAITING_COMMAND = auto()
    PLAYER_ACTION_APPLIED = auto()
    ENEMIES_PLANNED = auto()
    ENEMIES_RESOLVED = auto()
    SESSION_ENDED = auto()


class EventKind(Enum):
    """Things that happened during a turn, for the shell to report."""

    UNKNOWN_COMMAND = auto()
    OUT_OF_BOUNDS = auto()
    WALL_BUMP = auto()
    PLAYER_MOVED = auto()
    PLAYER_HIT_ENEMY = auto()  # amount=damage dealt, detail=enemy HP left
    ENEMY_KILLED = auto()  # amount=score awarded
    POTION_CONSUMED = auto()  # amount=HP restored, detail=heal roll
    ENEMY_ATTACK = auto()  # amount=damage taken
    ENEMY_BUMP_ATTACK = auto()  # amount=damage taken
    PLAYER_DIED = auto()
    QUIT = auto()
    NEW_HIGH_SCORE = auto()  # amount=new high score
    HIGH_SCORE_SAVE_FAILED = auto()


@dataclass(frozen=True)
class TurnEvent:
    kind: EventKind
    amount: int = 0
    detail: int = 0
    position: Optional[Tuple[int, int]] = None


@dataclass
class TurnResult:
    """Outcome of one submitted command."""

    consumed_turn: bool
    events: List[TurnEvent] = field(default_factory=list)
    ended: bool = False

    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]
