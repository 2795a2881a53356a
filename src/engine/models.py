"""
Pydantic models for the game engine.

This module contains the configuration, tile and snapshot models used
throughout the engine. The logic classes (Grid, TileSelection, GameSession)
live in their own modules.
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from ..verifiers.models import ValidationResult
from ..verifiers.wordlist import normalize_words


# Type aliases
SessionStatus = Literal["in-progress", "won", "lost"]
TileStatus = Literal["eligible", "selected", "selected-last", "disabled"]
ResetScope = Literal["selection", "full"]

IN_PROGRESS: SessionStatus = "in-progress"
WON: SessionStatus = "won"
LOST: SessionStatus = "lost"


# Demo board used when no configuration is given
DEFAULT_LETTERS: List[str] = [
    "A", "C", "E", "F",
    "M", "N", "R", "D",
    "C", "X", "U", "F",
    "I", "E", "N", "F",
]
DEFAULT_SOLUTION_WORDS: List[str] = ["ACE", "CAM", "RUN"]


class Tile(BaseModel):
    """A single letter cell, identified by its row-major index."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0)
    letter: str = Field(..., min_length=1, max_length=1)


class GameConfig(BaseModel):
    """
    Configuration for a game session.

    Validated eagerly: a config that can't produce a playable game raises
    pydantic's ValidationError (a ValueError) at construction.

    Attributes:
        columns: Tiles per row
        rows: Number of rows
        letters: Letter pool, row-major; letters past columns * rows are ignored
        solution_words: Target words; normalized to upper case, duplicates dropped
        min_word_length: Shortest word that counts
        game_id: Identifier shown in the share text
        domain: Domain shown in the share text
        reset_delay: Seconds the outcome stays on screen before the selection resets
    """

    columns: int = Field(default=4, ge=1)
    rows: int = Field(default=4, ge=1)
    letters: List[str] = Field(default_factory=lambda: list(DEFAULT_LETTERS))
    solution_words: List[str] = Field(default_factory=lambda: list(DEFAULT_SOLUTION_WORDS))
    min_word_length: int = Field(default=3, ge=1)
    game_id: int | str = 0
    domain: str = "words.xyz"
    reset_delay: float = Field(default=2.0, ge=0)

    @field_validator("letters")
    @classmethod
    def _normalize_letters(cls, value: List[str]) -> List[str]:
        letters = [letter.strip().upper() for letter in value]
        for index, letter in enumerate(letters):
            if len(letter) != 1:
                raise ValueError(
                    f"Letter at position {index} must be a single glyph, got {letter!r}"
                )
        return letters

    @field_validator("solution_words")
    @classmethod
    def _normalize_solution_words(cls, value: List[str]) -> List[str]:
        return normalize_words(value)

    @model_validator(mode="after")
    def _check_playable(self) -> "GameConfig":
        if len(self.letters) < self.num_tiles:
            raise ValueError(
                f"Number of letters provided ({len(self.letters)}) should be equal to "
                f"or greater than the number of tiles ({self.num_tiles})"
            )
        if not any(len(w) >= self.min_word_length for w in self.solution_words):
            raise ValueError(
                f"No solution word meets the minimum word length of {self.min_word_length}"
            )
        return self

    @property
    def num_tiles(self) -> int:
        """Number of tiles on the board (automatically derived from the layout)."""
        return self.columns * self.rows

    @property
    def board_letters(self) -> List[str]:
        """The letters actually placed on the board (first in, first out)."""
        return self.letters[:self.num_tiles]


class TileView(BaseModel):
    """A tile as presented to the rendering layer."""
    id: int
    letter: str
    status: TileStatus


class SessionSnapshot(BaseModel):
    """Read-only view of a session for presentation and serialization."""
    status: SessionStatus
    score: int = 0
    max_score: int = 0
    current_word: str = ""
    can_submit: bool = False
    reset_pending: bool = False
    columns: int = 0
    tiles: List[TileView] = Field(default_factory=list)
    solved: List[str] = Field(default_factory=list)
    last_result: Optional[ValidationResult] = None

    def tile_statuses(self) -> Dict[int, TileStatus]:
        return {t.id: t.status for t in self.tiles}
