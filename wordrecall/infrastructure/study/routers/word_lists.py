"""API routes for word list management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wordrecall.application.study.use_cases.word_list_use_case import WordListUseCase
from wordrecall.core import container
from wordrecall.domain.common.exceptions import DomainError
from wordrecall.domain.identity.entities.user import User
from wordrecall.domain.study.entities.word_list import WordList
from wordrecall.exceptions import WordRecallError
from wordrecall.infrastructure.common.di import inject_use_case
from wordrecall.infrastructure.common.schemas import SuccessResponse
from wordrecall.infrastructure.identity.dependencies import CurrentUser
from wordrecall.infrastructure.study.schemas import (
    WordEntrySchema,
    WordListDetails,
    WordListOwner,
    WordListRequest,
    WordListsResponse,
    WordListSummary,
    WordsTextResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lists", tags=["word-lists"])


def _to_details(word_list: WordList, owner: User | None, current_user: User) -> WordListDetails:
    return WordListDetails(
        id=word_list.id.value,
        name=word_list.name,
        owner=WordListOwner(
            id=word_list.owner_id.value,
            display_name=owner.display_name if owner else None,
        ),
        is_owner=word_list.is_owned_by(current_user.id),
        word_count=word_list.word_count,
        words=[
            WordEntrySchema(word=entry.word, definition=entry.definition)
            for entry in word_list.sorted_entries()
        ],
        created_at=word_list.created_at,
        updated_at=word_list.updated_at,
    )


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=WordListDetails, status_code=status.HTTP_201_CREATED)
def create_word_list(
    request: WordListRequest,
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListDetails:
    """
    Create a word list from pasted text.

    Each non-blank line is `WORD` or `WORD definition`; words are stored
    uppercase.
    """
    try:
        word_list = use_case.create_word_list(
            user_id=current_user.id.value,
            name=request.name,
            words_text=request.words_text,
        )
        return _to_details(word_list, current_user, current_user)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("create word list", e) from e


@router.get("", response_model=WordListsResponse)
def get_word_lists(
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListsResponse:
    """Get every word list, newest first."""
    try:
        overviews = use_case.get_word_lists()
        return WordListsResponse(
            word_lists=[
                WordListSummary(
                    id=overview.id,
                    name=overview.name,
                    word_count=overview.word_count,
                    owner=WordListOwner(id=overview.owner_id, display_name=overview.owner_name),
                    created_at=overview.created_at,
                )
                for overview in overviews
            ]
        )
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("list word lists", e) from e


@router.get("/{word_list_id}", response_model=WordListDetails)
def get_word_list(
    word_list_id: int,
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListDetails:
    """
    Get a word list with its words in alphabetical order.

    Raises:
        HTTPException: 404 if the list doesn't exist
    """
    try:
        result = use_case.get_word_list(word_list_id)
        return _to_details(result.word_list, result.owner, current_user)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get word list {word_list_id}", e) from e


@router.get("/{word_list_id}/words-text", response_model=WordsTextResponse)
def get_words_text(
    word_list_id: int,
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordsTextResponse:
    """Get the list rendered back to its text format, for the edit form."""
    try:
        return WordsTextResponse(words_text=use_case.get_words_text(word_list_id))
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"render word list {word_list_id}", e) from e


@router.put("/{word_list_id}", response_model=WordListDetails)
def update_word_list(
    word_list_id: int,
    request: WordListRequest,
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> WordListDetails:
    """
    Rename a word list and replace all of its words.

    Only the owner can edit. Sessions already running keep the old words.
    """
    try:
        word_list = use_case.update_word_list(
            word_list_id=word_list_id,
            user_id=current_user.id.value,
            name=request.name,
            words_text=request.words_text,
        )
        return _to_details(word_list, current_user, current_user)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update word list {word_list_id}", e) from e


@router.delete("/{word_list_id}", response_model=SuccessResponse)
def delete_word_list(
    word_list_id: int,
    current_user: CurrentUser,
    use_case: WordListUseCase = Depends(inject_use_case(container.word_list_use_case)),
) -> SuccessResponse:
    """Delete a word list and its words. Only the owner can delete."""
    try:
        use_case.delete_word_list(word_list_id=word_list_id, user_id=current_user.id.value)
        return SuccessResponse(success=True, message="Word list deleted successfully")
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"delete word list {word_list_id}", e) from e
