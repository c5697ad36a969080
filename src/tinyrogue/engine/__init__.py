from .commands import Command
from .events import EventKind, TurnEvent, TurnPhase, TurnResult
from .snapshot import GameSnapshot
from .turns import TurnResolver

__all__ = [
    "Command",
    "EventKind",
    "TurnEvent",
    "TurnPhase",
    "TurnResult",
    "GameSnapshot",
    "TurnResolver",
]
