"""Word verification for the word grid game."""

from .dictionary import SolutionDictionary
from .models import Outcome, ValidationResult
from .wordlist import normalize_word, normalize_words, load_word_list

__all__ = [
    # Dictionary
    "SolutionDictionary",
    # Models
    "Outcome",
    "ValidationResult",
    # Word lists
    "normalize_word",
    "normalize_words",
    "load_word_list",
]
