"""Domain events raised by the WordList aggregate."""

from dataclasses import dataclass

from wordrecall.domain.common.domain_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class WordListCreated(DomainEvent):
    owner_id: int
    name: str
    word_count: int


@dataclass(frozen=True, kw_only=True)
class WordListEntriesReplaced(DomainEvent):
    word_list_id: int
    previous_word_count: int
    word_count: int


@dataclass(frozen=True, kw_only=True)
class WordListRenamed(DomainEvent):
    word_list_id: int
    previous_name: str
    name: str
