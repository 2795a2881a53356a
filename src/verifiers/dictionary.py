"""
Solution dictionary for a single game.

Classifies candidate words in a fixed order:
1. Empty word
2. Shorter than the minimum word length
3. Not in the effective dictionary
4. Already solved (duplicate)
5. Valid
"""

from typing import List, Set
from pydantic import BaseModel, Field, field_validator

from .models import ValidationResult
from .wordlist import normalize_words


class SolutionDictionary(BaseModel):
    """
    The bounded set of target words for a game.

    Attributes:
        solution_words: Every configured target word
        min_word_length: Shortest word that counts
        solved: Words already found in the current game, assigned by the session
    """

    solution_words: List[str] = Field(default_factory=list)
    min_word_length: int = Field(default=3, ge=1)
    solved: Set[str] = Field(default_factory=set)

    @field_validator("solution_words")
    @classmethod
    def _normalize(cls, value: List[str]) -> List[str]:
        return normalize_words(value)

    @property
    def words(self) -> List[str]:
        """The effective dictionary: solution words meeting the minimum length."""
        return [w for w in self.solution_words if len(w) >= self.min_word_length]

    @property
    def size(self) -> int:
        return len(self.words)

    @property
    def remaining(self) -> List[str]:
        """Effective words not solved yet."""
        return [w for w in self.words if w not in self.solved]

    def contains(self, word: str) -> bool:
        return word in self.words

    def validate(self, word: str) -> ValidationResult:
        """
        Classify a candidate word.

        Never raises for game input: every word gets exactly one outcome.

        Args:
            word: The candidate, as spelled by the selected tiles

        Returns:
            ValidationResult with outcome, message and short message
        """
        word = word or ""

        if len(word) <= 0:
            return ValidationResult(
                outcome="invalid",
                message="Word is empty.",
                short_message="Invalid word!",
                word=word,
            )

        if len(word) < self.min_word_length:
            return ValidationResult(
                outcome="invalid",
                message=f"Minimum word length is {self.min_word_length} characters.",
                short_message="Too short!",
                word=word,
            )

        if not self.contains(word):
            return ValidationResult(
                outcome="invalid",
                message=f"“{word}” isn't a valid word.",
                short_message="Invalid word!",
                word=word,
            )

        if word in self.solved:
            return ValidationResult(
                outcome="duplicate",
                message=f"“{word}” has already been solved.",
                short_message="Word already solved!",
                word=word,
            )

        return ValidationResult(
            outcome="valid",
            message=f"“{word}” is valid!",
            short_message="Word found!",
            word=word,
        )
