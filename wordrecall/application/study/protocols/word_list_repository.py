"""Protocol for WordList repository in study context."""

from typing import Protocol

from wordrecall.application.study.dtos import WordListOverview
from wordrecall.domain.common.value_objects.ids import WordListId
from wordrecall.domain.study.entities.word_list import WordList


class WordListRepositoryProtocol(Protocol):
    """Protocol for WordList repository operations."""

    def find_by_id(self, word_list_id: WordListId) -> WordList | None:
        """
        Find a word list with all of its entries.

        Returns:
            WordList with entries in parse order, None if it doesn't exist
        """
        ...

    def list_overviews(self) -> list[WordListOverview]:
        """
        Get every word list with its word count, without loading entries.

        Returns:
            Overviews ordered by created_at DESC
        """
        ...

    def save(self, word_list: WordList) -> WordList:
        """
        Save a word list (create or update).

        Updating replaces name and the complete entry set in one transaction.

        Returns:
            Saved word list with database-generated values
        """
        ...

    def delete(self, word_list_id: WordListId) -> bool:
        """
        Delete a word list and its entries.

        Returns:
            True if deleted, False if not found
        """
        ...
