"""WordEntry value object."""

from dataclasses import dataclass

from wordrecall.domain.common.exceptions import ValidationError
from wordrecall.domain.common.value_object import ValueObject

# Matches the words.word column
MAX_WORD_LENGTH = 255


@dataclass(frozen=True)
class WordEntry(ValueObject):
    """
    One word of a list plus its optional definition.

    The word is stored uppercase with no surrounding whitespace, the
    definition exactly as typed (trimmed) or None. A line such as
    "cat<TAB> feline" therefore yields the word "CAT": whitespace between
    the word and the first space is dropped along with the rest.
    """

    word: str
    definition: str | None = None

    def __post_init__(self) -> None:
        if not self.word or self.word != self.word.strip():
            raise ValidationError("Word must be non-empty text", field="word", value=self.word)
        if len(self.word) > MAX_WORD_LENGTH:
            raise ValidationError(
                f"Word cannot exceed {MAX_WORD_LENGTH} characters",
                field="word",
                value=self.word,
            )
        if self.definition is not None and not self.definition.strip():
            raise ValidationError(
                "Definition must be None or non-empty text",
                field="definition",
                value=self.definition,
            )

    @classmethod
    def create(cls, word: str, definition: str | None = None) -> "WordEntry":
        """Build an entry from raw text, normalizing case and blanks."""
        cleaned = definition.strip() if definition else None
        return cls(word=word.strip().upper(), definition=cleaned or None)

    def to_line(self) -> str:
        """Render as one line of the list text format."""
        if self.definition:
            return f"{self.word} {self.definition}"
        return self.word
