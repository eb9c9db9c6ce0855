"""
Free-recall study session.

A session snapshots the words of a list, then classifies every word the
user types as a success, a duplicate or an error. Finishing produces a
ResultsSummary. Everything here is in-memory and synchronous; callers
serialize submissions for a given session.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from wordrecall.domain.study.entities.word_entry import WordEntry
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.domain.study.exceptions import EmptyTargetSetError, SessionCompletedError


class SessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class FeedbackType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class Feedback:
    """Classification of one submission, for immediate display."""

    type: FeedbackType
    word: str
    definition: str | None = None


def percent_rounded(part: int, total: int) -> int:
    """
    100 * part / total rounded half up, in integer arithmetic.

    1 of 8 is 12.5% and rounds to 13, never to 12.
    """
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


@dataclass(frozen=True)
class ResultsSummary:
    """
    Outcome of a finished study session.

    remembered keeps first-success order and incorrect first-occurrence
    order. missed follows the order of the list the session was built from.
    """

    list_name: str
    total_words: int
    remembered: tuple[WordEntry, ...]
    missed: tuple[WordEntry, ...]
    incorrect: tuple[str, ...]

    @property
    def score(self) -> int:
        return percent_rounded(len(self.remembered), self.total_words)

    def to_dict(self) -> dict[str, Any]:
        return {
            "list_name": self.list_name,
            "total_words": self.total_words,
            "remembered": [e.to_primitive() for e in self.remembered],
            "missed": [e.to_primitive() for e in self.missed],
            "incorrect": list(self.incorrect),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResultsSummary":
        return cls(
            list_name=data["list_name"],
            total_words=data["total_words"],
            remembered=tuple(WordEntry(**item) for item in data["remembered"]),
            missed=tuple(WordEntry(**item) for item in data["missed"]),
            incorrect=tuple(data["incorrect"]),
        )


class StudySession:
    """
    Recall state machine over a fixed target set of words.

    States:
    - ACTIVE: accepts submissions
    - COMPLETED: finish() was called; finish() may be called again and
      recomputes the same summary, submit() is rejected
    """

    def __init__(
        self,
        list_name: str,
        entries: Iterable[WordEntry],
        word_list_id: int | None = None,
    ) -> None:
        """
        Snapshot the target words.

        Raises:
            EmptyTargetSetError: If entries is empty
        """
        targets: dict[str, str | None] = {}
        for entry in entries:
            # Later duplicates win, matching how the list is looked up.
            targets[entry.word.upper()] = entry.definition
        if not targets:
            raise EmptyTargetSetError(list_name)

        self.list_name = list_name
        self.word_list_id = word_list_id
        self.status = SessionStatus.ACTIVE
        self._targets: Mapping[str, str | None] = MappingProxyType(targets)
        # dicts double as insertion-ordered sets
        self._remembered: dict[str, WordEntry] = {}
        self._incorrect: dict[str, None] = {}

    @classmethod
    def from_word_list(cls, word_list: WordList) -> "StudySession":
        return cls(word_list.name, word_list.entries, word_list_id=word_list.id.value)

    @property
    def total_words(self) -> int:
        return len(self._targets)

    @property
    def remembered(self) -> list[WordEntry]:
        return list(self._remembered.values())

    @property
    def incorrect_attempts(self) -> list[str]:
        return list(self._incorrect)

    @property
    def progress_percent(self) -> float:
        return 100 * len(self._remembered) / self.total_words

    @property
    def is_completed(self) -> bool:
        return self.status is SessionStatus.COMPLETED

    def recently_remembered(self, limit: int = 20) -> list[WordEntry]:
        """Most recent successes first."""
        return self.remembered[::-1][:limit]

    def submit(self, raw_input: str) -> Feedback | None:
        """
        Classify one typed word and update the session.

        Args:
            raw_input: Text as typed; trimmed and uppercased here

        Returns:
            Feedback for the submission, or None for blank input

        Raises:
            SessionCompletedError: If the session already finished
        """
        if self.is_completed:
            raise SessionCompletedError

        word = raw_input.strip().upper()
        if not word:
            return None

        if word in self._remembered:
            return Feedback(FeedbackType.DUPLICATE, word)

        if word in self._targets:
            entry = WordEntry(word=word, definition=self._targets[word])
            self._remembered[word] = entry
            return Feedback(FeedbackType.SUCCESS, word, entry.definition)

        self._incorrect.setdefault(word, None)
        return Feedback(FeedbackType.ERROR, word)

    def finish(self) -> ResultsSummary:
        """Complete the session and summarize it. Does not touch the recall state."""
        self.status = SessionStatus.COMPLETED
        missed = tuple(
            WordEntry(word=word, definition=definition)
            for word, definition in self._targets.items()
            if word not in self._remembered
        )
        return ResultsSummary(
            list_name=self.list_name,
            total_words=self.total_words,
            remembered=tuple(self._remembered.values()),
            missed=missed,
            incorrect=tuple(self._incorrect),
        )
