"""Use case for word list operations."""

import structlog

from wordrecall.application.identity.protocols import UserRepositoryProtocol
from wordrecall.application.study.dtos import WordListOverview, WordListWithOwner
from wordrecall.application.study.protocols import (
    ResultsStoreProtocol,
    WordListRepositoryProtocol,
)
from wordrecall.domain.common.aggregate_root import AggregateRoot
from wordrecall.domain.common.exceptions import ValidationError
from wordrecall.domain.common.value_objects.ids import UserId, WordListId
from wordrecall.domain.study.entities.word_entry import WordEntry
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.domain.study.services.list_parser import ListParser
from wordrecall.exceptions import WordListNotFoundError

logger = structlog.get_logger(__name__)


def _log_events(aggregate: AggregateRoot) -> None:  # type: ignore[type-arg]
    for event in aggregate.collect_events():
        logger.info("domain_event", **event.to_dict())


class WordListUseCase:
    """Use case for word list CRUD operations."""

    def __init__(
        self,
        word_list_repository: WordListRepositoryProtocol,
        user_repository: UserRepositoryProtocol,
        results_store: ResultsStoreProtocol,
        list_parser: ListParser,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.word_list_repository = word_list_repository
        self.user_repository = user_repository
        self.results_store = results_store
        self.list_parser = list_parser

    def _parse_form(self, name: str, words_text: str) -> list[WordEntry]:
        if not name or not name.strip():
            raise ValidationError("Name is required", field="name")
        if not words_text or not words_text.strip():
            raise ValidationError("Words are required", field="words_text")
        return self.list_parser.parse(words_text)

    def _get(self, word_list_id: int) -> WordList:
        word_list = self.word_list_repository.find_by_id(WordListId(word_list_id))
        if not word_list:
            raise WordListNotFoundError(word_list_id)
        return word_list

    def create_word_list(self, user_id: int, name: str, words_text: str) -> WordList:
        """
        Create a new word list from pasted text.

        Args:
            user_id: ID of the user creating (and owning) the list
            name: List name, trimmed
            words_text: Text in the WORD definition format

        Returns:
            Created word list domain entity

        Raises:
            ValidationError: If name or words are missing, or no word parses
        """
        entries = self._parse_form(name, words_text)
        word_list = WordList.create(owner_id=UserId(user_id), name=name, entries=entries)
        saved = self.word_list_repository.save(word_list)
        _log_events(word_list)

        logger.info(
            "created_word_list",
            word_list_id=saved.id.value,
            user_id=user_id,
            word_count=saved.word_count,
        )
        return saved

    def get_word_lists(self) -> list[WordListOverview]:
        """
        Get every word list, newest first, with owner display names.

        Lists are shared: any signed-in user can browse and study any list.
        """
        overviews = self.word_list_repository.list_overviews()
        owners = self.user_repository.find_by_ids(list({UserId(o.owner_id) for o in overviews}))
        for overview in overviews:
            owner = owners.get(overview.owner_id)
            overview.owner_name = owner.display_name if owner else None
        return overviews

    def get_word_list(self, word_list_id: int) -> WordListWithOwner:
        """
        Get a word list with its entries and owner.

        Raises:
            WordListNotFoundError: If the list doesn't exist
        """
        word_list = self._get(word_list_id)
        owner = self.user_repository.find_by_id(word_list.owner_id)
        return WordListWithOwner(word_list=word_list, owner=owner)

    def get_words_text(self, word_list_id: int) -> str:
        """Render a list back to the text format, for pre-filling an edit form."""
        return self.list_parser.serialize(self._get(word_list_id).entries)

    def update_word_list(
        self, word_list_id: int, user_id: int, name: str, words_text: str
    ) -> WordList:
        """
        Rename a list and replace its entire entry set.

        The text is parsed before anything is touched, so a bad edit leaves
        the stored list as it was.

        Raises:
            WordListNotFoundError: If the list doesn't exist
            AuthorizationError: If user_id doesn't own the list
            ValidationError: If name or words are missing, or no word parses
        """
        word_list = self._get(word_list_id)
        word_list.ensure_owned_by(UserId(user_id), "edit")

        entries = self._parse_form(name, words_text)
        word_list.rename(name)
        word_list.replace_entries(entries)
        saved = self.word_list_repository.save(word_list)
        _log_events(word_list)

        logger.info("updated_word_list", word_list_id=word_list_id, word_count=saved.word_count)
        return saved

    def delete_word_list(self, word_list_id: int, user_id: int) -> None:
        """
        Delete a word list and everything hanging off it.

        Raises:
            WordListNotFoundError: If the list doesn't exist
            AuthorizationError: If user_id doesn't own the list
        """
        word_list = self._get(word_list_id)
        word_list.ensure_owned_by(UserId(user_id), "delete")

        if not self.word_list_repository.delete(word_list.id):
            raise WordListNotFoundError(word_list_id)
        self.results_store.discard_list(word_list.id)

        logger.info("deleted_word_list", word_list_id=word_list_id, user_id=user_id)
