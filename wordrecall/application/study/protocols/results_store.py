"""Protocol for the keyed transient store of study results."""

from typing import Protocol

from wordrecall.domain.common.value_objects.ids import UserId, WordListId
from wordrecall.domain.study.services.study_session import ResultsSummary


class ResultsStoreProtocol(Protocol):
    def save(self, user_id: UserId, word_list_id: WordListId, summary: ResultsSummary) -> None:
        """Store summary as the latest result for (user, list), replacing any older one."""
        ...

    def get(self, user_id: UserId, word_list_id: WordListId) -> ResultsSummary | None: ...

    def discard_list(self, word_list_id: WordListId) -> None:
        """Forget every stored result for a list."""
        ...
