"""Game engine for the word grid game."""

from .models import (
    GameConfig,
    Tile,
    TileView,
    SessionSnapshot,
    SessionStatus,
    TileStatus,
    ResetScope,
    IN_PROGRESS,
    WON,
    LOST,
    DEFAULT_LETTERS,
    DEFAULT_SOLUTION_WORDS,
)
from .grid import Grid, are_adjacent
from .selection import TileSelection
from .scheduler import ScheduledAction, ThreadingScheduler, ManualScheduler
from .session import GameSession

__all__ = [
    "GameConfig",
    "Tile",
    "TileView",
    "SessionSnapshot",
    "SessionStatus",
    "TileStatus",
    "ResetScope",
    "IN_PROGRESS",
    "WON",
    "LOST",
    "DEFAULT_LETTERS",
    "DEFAULT_SOLUTION_WORDS",
    "Grid",
    "are_adjacent",
    "TileSelection",
    "ScheduledAction",
    "ThreadingScheduler",
    "ManualScheduler",
    "GameSession",
]
