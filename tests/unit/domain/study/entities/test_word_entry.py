"""Tests for the WordEntry value object."""

import pytest

from wordrecall.domain.common.exceptions import ValidationError
from wordrecall.domain.study.entities.word_entry import MAX_WORD_LENGTH, WordEntry


class TestWordEntry:
    def test_create_normalizes(self) -> None:
        entry = WordEntry.create("  hello ", "  a greeting ")

        assert entry == WordEntry("HELLO", "a greeting")

    def test_blank_definition_becomes_none(self) -> None:
        assert WordEntry.create("hello", "   ").definition is None
        assert WordEntry.create("hello", "").definition is None

    def test_empty_word_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            WordEntry("")

    def test_untrimmed_word_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            WordEntry(" HELLO")

    def test_blank_definition_is_invalid(self) -> None:
        with pytest.raises(ValidationError):
            WordEntry("HELLO", "  ")

    def test_word_length_limit(self) -> None:
        assert len(WordEntry("A" * MAX_WORD_LENGTH).word) == MAX_WORD_LENGTH
        with pytest.raises(ValidationError, match="cannot exceed 255"):
            WordEntry("A" * (MAX_WORD_LENGTH + 1))

    def test_to_line(self) -> None:
        assert WordEntry("HELLO", "a greeting").to_line() == "HELLO a greeting"
        assert WordEntry("HELLO").to_line() == "HELLO"

    def test_is_immutable(self) -> None:
        entry = WordEntry("HELLO")
        with pytest.raises(AttributeError):
            entry.word = "BYE"  # type: ignore[misc]
