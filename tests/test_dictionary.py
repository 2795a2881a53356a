"""
Tests for word classification against the solution dictionary.

The checks run in a fixed order, so the ordering tests matter as much as the
individual outcomes.
"""

import pytest

from src.verifiers import (
    SolutionDictionary,
    ValidationResult,
    load_word_list,
    normalize_word,
    normalize_words,
)


@pytest.fixture
def dictionary():
    return SolutionDictionary(solution_words=["ACE", "CAM", "RUN"], min_word_length=3)


class TestOutcomes:
    """Test each classification outcome."""

    def test_empty_word(self, dictionary):
        result = dictionary.validate("")
        assert result.outcome == "invalid"
        assert result.message == "Word is empty."
        assert result.short_message == "Invalid word!"

    def test_too_short(self, dictionary):
        result = dictionary.validate("A")
        assert result.outcome == "invalid"
        assert result.message == "Minimum word length is 3 characters."
        assert result.short_message == "Too short!"

    def test_not_in_dictionary(self, dictionary):
        result = dictionary.validate("ZZZ")
        assert result.outcome == "invalid"
        assert "ZZZ" in result.message
        assert "isn't a valid word." in result.message
        assert result.short_message == "Invalid word!"
        assert result.ends_game

    def test_valid(self, dictionary):
        result = dictionary.validate("ACE")
        assert isinstance(result, ValidationResult)
        assert result.outcome == "valid"
        assert result.is_valid
        assert result.message == "“ACE” is valid!"
        assert result.short_message == "Word found!"
        assert result.word == "ACE"

    def test_duplicate_after_solved(self, dictionary):
        assert dictionary.validate("ACE").outcome == "valid"
        dictionary.solved = {"ACE"}
        result = dictionary.validate("ACE")
        assert result.outcome == "duplicate"
        assert "has already been solved." in result.message
        assert result.short_message == "Word already solved!"
        assert not result.ends_game

    def test_none_treated_as_empty(self, dictionary):
        assert dictionary.validate(None).message == "Word is empty."


class TestOrdering:
    """Earlier checks must win over later ones."""

    def test_short_word_in_solved_is_still_too_short(self):
        dictionary = SolutionDictionary(solution_words=["AT", "ACE"], min_word_length=3)
        dictionary.solved = {"AT"}
        result = dictionary.validate("AT")
        assert result.outcome == "invalid"
        assert result.short_message == "Too short!"

    def test_solved_word_outside_dictionary_is_invalid(self, dictionary):
        dictionary.solved = {"ZZZ"}
        assert dictionary.validate("ZZZ").outcome == "invalid"

    def test_case_is_not_folded_at_validation(self, dictionary):
        assert dictionary.validate("ace").outcome == "invalid"


class TestEffectiveDictionary:
    """Test the minimum-length filter and normalization."""

    def test_short_words_excluded(self):
        dictionary = SolutionDictionary(solution_words=["AT", "ACE", "RUNS"], min_word_length=3)
        assert dictionary.words == ["ACE", "RUNS"]
        assert dictionary.size == 2
        assert not dictionary.contains("AT")

    def test_min_length_one(self):
        dictionary = SolutionDictionary(solution_words=["A"], min_word_length=1)
        assert dictionary.validate("A").outcome == "valid"

    def test_words_normalized_and_deduplicated(self):
        dictionary = SolutionDictionary(solution_words=[" ace", "ACE", "run ", ""])
        assert dictionary.solution_words == ["ACE", "RUN"]

    def test_remaining(self, dictionary):
        dictionary.solved = {"CAM"}
        assert dictionary.remaining == ["ACE", "RUN"]

    def test_min_length_must_be_positive(self):
        with pytest.raises(ValueError):
            SolutionDictionary(solution_words=["ACE"], min_word_length=0)


class TestWordLists:
    """Test word list helpers."""

    def test_normalize_word(self):
        assert normalize_word("  ru n\n") == "RUN"

    def test_normalize_words_keeps_first_order(self):
        assert normalize_words(["run", "ace", "RUN", "cam"]) == ["RUN", "ACE", "CAM"]

    def test_load_word_list(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# board 7\nace\n\ncam\nACE\n  run  \n", encoding="utf-8")
        assert load_word_list(path) == ["ACE", "CAM", "RUN"]

    def test_load_missing_word_list(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "missing.txt")
