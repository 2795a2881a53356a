"""Data models for word verification."""

from typing import Literal
from pydantic import BaseModel, ConfigDict


Outcome = Literal["valid", "duplicate", "invalid"]


class ValidationResult(BaseModel):
    """Result of checking a candidate word against the solution dictionary."""
    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    message: str
    short_message: str
    word: str = ""

    @property
    def is_valid(self) -> bool:
        return self.outcome == "valid"

    @property
    def ends_game(self) -> bool:
        """An invalid submission is the only outcome that loses the game."""
        return self.outcome == "invalid"
