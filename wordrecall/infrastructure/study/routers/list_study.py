"""API routes for studying a specific word list."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wordrecall.application.study.use_cases.study_use_case import StudyUseCase
from wordrecall.core import container
from wordrecall.domain.common.exceptions import DomainError
from wordrecall.exceptions import WordRecallError
from wordrecall.infrastructure.common.di import inject_use_case
from wordrecall.infrastructure.identity.dependencies import CurrentUser
from wordrecall.infrastructure.study.routers._converters import (
    to_progress_response,
    to_results_response,
)
from wordrecall.infrastructure.study.schemas import StudyProgressResponse, StudyResultsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lists", tags=["study"])


@router.post(
    "/{word_list_id}/study-sessions",
    response_model=StudyProgressResponse,
    status_code=status.HTTP_201_CREATED,
)
def start_study_session(
    word_list_id: int,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyProgressResponse:
    """
    Start a free-recall session over the current words of a list.

    Raises:
        HTTPException: 404 if the list doesn't exist, 409 if it has no words
    """
    try:
        progress = use_case.start_session(word_list_id, current_user.id.value)
        return to_progress_response(progress)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to start study session for word list {word_list_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{word_list_id}/results", response_model=StudyResultsResponse)
def get_latest_results(
    word_list_id: int,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyResultsResponse:
    """Get the summary of the user's most recently finished session on a list."""
    try:
        summary = use_case.get_latest_results(word_list_id, current_user.id.value)
        return to_results_response(summary)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get results for word list {word_list_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
