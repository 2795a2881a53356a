"""Word list normalization and loading."""

import re
from pathlib import Path
from typing import Iterable, List


_WHITESPACE = re.compile(r"\s+")


def normalize_word(word: str) -> str:
    """Strip surrounding and inner whitespace and upper-case ``word``."""
    return _WHITESPACE.sub("", word).upper()


def normalize_words(words: Iterable[str]) -> List[str]:
    """
    Normalize a collection of words, dropping blanks and duplicates.

    The first occurrence of each word keeps its position, so the configured
    order survives for display.
    """
    seen = set()
    result: List[str] = []
    for raw in words:
        word = normalize_word(raw)
        if not word or word in seen:
            continue
        seen.add(word)
        result.append(word)
    return result


def load_word_list(path: str | Path) -> List[str]:
    """
    Load a plain-text word list with one word per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        FileNotFoundError: If the word list does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, encoding="utf-8") as f:
        lines = [line.strip() for line in f]

    return normalize_words(line for line in lines if line and not line.startswith("#"))
