"""
Domain service turning pasted list text into word entries.

This is a pure domain service with no infrastructure dependencies.

Text format, one entry per non-blank line:

    WORD
    WORD definition text...

The word is everything before the first space, the definition is the
trimmed remainder. Only the space character delimits; tabs and repeated
spaces inside the definition are kept.
"""

from collections.abc import Iterable

from wordrecall.domain.common.exceptions import ValidationError
from wordrecall.domain.study.entities.word_entry import WordEntry

WORD_DELIMITER = " "
BYTE_ORDER_MARK = "\ufeff"


def _trim(text: str) -> str:
    # str.strip() leaves U+FEFF alone; pasted text from some editors starts with one
    return text.strip().strip(BYTE_ORDER_MARK).strip()


class ListParser:
    """Parse and serialize the word list text format."""

    def parse(self, raw_text: str) -> list[WordEntry]:
        """
        Parse pasted text into ordered word entries.

        Args:
            raw_text: Newline separated list text

        Returns:
            One entry per non-blank line, in input order, duplicates kept

        Raises:
            ValidationError: If no line yields an entry, or a word is too long
        """
        entries = [self.parse_line(line) for line in raw_text.split("\n") if _trim(line)]
        if not entries:
            raise ValidationError("at least one word required", field="words_text")
        return entries

    def parse_line(self, line: str) -> WordEntry:
        """Parse a single non-blank line."""
        word, _, definition = _trim(line).partition(WORD_DELIMITER)
        return WordEntry.create(word, definition)

    def serialize(self, entries: Iterable[WordEntry]) -> str:
        """Render entries back into the text format, one per line."""
        return "\n".join(entry.to_line() for entry in entries)
