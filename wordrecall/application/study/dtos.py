"""DTOs passed between the study use cases and the routers."""

from dataclasses import dataclass
from datetime import datetime

from wordrecall.domain.identity.entities.user import User
from wordrecall.domain.study.entities.word_entry import WordEntry
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.domain.study.services.study_session import Feedback, SessionStatus


@dataclass
class WordListOverview:
    """A word list as shown when browsing: no entries, just the count."""

    id: int
    name: str
    owner_id: int
    word_count: int
    created_at: datetime
    owner_name: str | None = None


@dataclass
class WordListWithOwner:
    """DTO for a word list together with the user who owns it."""

    word_list: WordList
    owner: User | None


@dataclass
class SessionProgress:
    """Snapshot of an in-flight study session."""

    session_id: str
    word_list_id: int | None
    list_name: str
    status: SessionStatus
    remembered_count: int
    total_words: int
    progress_percent: float
    incorrect_count: int
    recently_remembered: list[WordEntry]


@dataclass
class AttemptOutcome:
    """Feedback for one submission plus where the session now stands."""

    feedback: Feedback | None
    progress: SessionProgress
