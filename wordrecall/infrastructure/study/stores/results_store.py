"""
In-memory store of the latest study results per user and list.

Summaries are kept as JSON documents, the same shape the API returns,
so swapping this for a cache server only changes where the text lives.
"""

import json
import threading

from wordrecall.domain.common.value_objects.ids import UserId, WordListId
from wordrecall.domain.study.services.study_session import ResultsSummary


class InMemoryResultsStore:
    """Thread-safe keyed store of serialized ResultsSummary documents."""

    def __init__(self) -> None:
        self._documents: dict[tuple[int, int], str] = {}
        self._lock = threading.Lock()

    def save(self, user_id: UserId, word_list_id: WordListId, summary: ResultsSummary) -> None:
        document = json.dumps(summary.to_dict())
        with self._lock:
            self._documents[(user_id.value, word_list_id.value)] = document

    def get(self, user_id: UserId, word_list_id: WordListId) -> ResultsSummary | None:
        with self._lock:
            document = self._documents.get((user_id.value, word_list_id.value))
        if document is None:
            return None
        return ResultsSummary.from_dict(json.loads(document))

    def discard_list(self, word_list_id: WordListId) -> None:
        with self._lock:
            for key in [k for k in self._documents if k[1] == word_list_id.value]:
                del self._documents[key]
