"""
WordList aggregate root.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from wordrecall.domain.common.aggregate_root import AggregateRoot
from wordrecall.domain.common.exceptions import AuthorizationError, ValidationError
from wordrecall.domain.common.value_objects import UserId, WordListId
from wordrecall.domain.study.entities.word_entry import WordEntry
from wordrecall.domain.study.events import (
    WordListCreated,
    WordListEntriesReplaced,
    WordListRenamed,
)

MAX_NAME_LENGTH = 200


def _clean_name(name: str) -> str:
    cleaned = name.strip() if name else ""
    if not cleaned:
        raise ValidationError("Name is required", field="name", value=name)
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )
    return cleaned


def _check_entries(entries: Iterable[WordEntry]) -> tuple[WordEntry, ...]:
    result = tuple(entries)
    if not result:
        raise ValidationError("at least one word required", field="words")
    return result


@dataclass
class WordList(AggregateRoot[WordListId]):
    """
    A named, ordered collection of word entries owned by one user.

    Business Rules:
    - Name is trimmed and non-empty
    - A list always has at least one entry
    - Entries are never edited one by one: an edit replaces the whole set
    - Only the owner may edit or delete the list
    """

    id: WordListId
    owner_id: UserId
    name: str
    entries: tuple[WordEntry, ...]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = _clean_name(self.name)
        self.entries = _check_entries(self.entries)

    @property
    def word_count(self) -> int:
        return len(self.entries)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def ensure_owned_by(self, user_id: UserId, action: str) -> None:
        """
        Raise unless user_id owns this list.

        Raises:
            AuthorizationError: If the list belongs to someone else
        """
        if not self.is_owned_by(user_id):
            raise AuthorizationError(f"You can only {action} your own word lists")

    def rename(self, name: str) -> None:
        cleaned = _clean_name(name)
        if cleaned == self.name:
            return
        previous = self.name
        self.name = cleaned
        self._record_event(
            WordListRenamed(word_list_id=self.id.value, previous_name=previous, name=cleaned)
        )

    def replace_entries(self, entries: Iterable[WordEntry]) -> None:
        """
        Swap the complete entry set for a new one.

        Raises:
            ValidationError: If the new set is empty
        """
        new_entries = _check_entries(entries)
        previous_count = self.word_count
        self.entries = new_entries
        self._record_event(
            WordListEntriesReplaced(
                word_list_id=self.id.value,
                previous_word_count=previous_count,
                word_count=len(new_entries),
            )
        )

    def sorted_entries(self) -> list[WordEntry]:
        """Entries ordered by word, the order list pages show them in."""
        return sorted(self.entries, key=lambda e: e.word)

    @classmethod
    def create(cls, owner_id: UserId, name: str, entries: Iterable[WordEntry]) -> "WordList":
        """Create a new word list (ID will be 0 until persisted)."""
        word_list = cls(
            id=WordListId.generate(),
            owner_id=owner_id,
            name=name,
            entries=tuple(entries),
        )
        word_list._record_event(
            WordListCreated(
                owner_id=owner_id.value,
                name=word_list.name,
                word_count=word_list.word_count,
            )
        )
        return word_list

    @classmethod
    def create_with_id(
        cls,
        id: WordListId,
        owner_id: UserId,
        name: str,
        entries: Iterable[WordEntry],
        created_at: datetime,
        updated_at: datetime,
    ) -> "WordList":
        """Reconstitute a word list from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            entries=tuple(entries),
            created_at=created_at,
            updated_at=updated_at,
        )
