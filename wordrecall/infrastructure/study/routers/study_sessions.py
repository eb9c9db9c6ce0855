"""API routes for running study sessions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wordrecall.application.study.use_cases.study_use_case import StudyUseCase
from wordrecall.core import container
from wordrecall.domain.common.exceptions import DomainError
from wordrecall.exceptions import WordRecallError
from wordrecall.infrastructure.common.di import inject_use_case
from wordrecall.infrastructure.common.schemas import SuccessResponse
from wordrecall.infrastructure.identity.dependencies import CurrentUser
from wordrecall.infrastructure.study.routers._converters import (
    to_progress_response,
    to_results_response,
)
from wordrecall.infrastructure.study.schemas import (
    AttemptRequest,
    AttemptResponse,
    FeedbackSchema,
    StudyProgressResponse,
    StudyResultsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study-sessions", tags=["study"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/{session_id}", response_model=StudyProgressResponse)
def get_study_session(
    session_id: str,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyProgressResponse:
    """Get progress of a running session."""
    try:
        return to_progress_response(use_case.get_progress(session_id, current_user.id.value))
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get study session {session_id}", e) from e


@router.post("/{session_id}/attempts", response_model=AttemptResponse)
def submit_attempt(
    session_id: str,
    request: AttemptRequest,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> AttemptResponse:
    """
    Submit one recalled word.

    The feedback is SUCCESS for a new list word, DUPLICATE for one already
    remembered and ERROR for anything not in the list. Blank input is
    ignored and comes back with `feedback: null`.
    """
    try:
        outcome = use_case.submit_attempt(session_id, current_user.id.value, request.input)
        return AttemptResponse(
            feedback=FeedbackSchema.model_validate(outcome.feedback) if outcome.feedback else None,
            progress=to_progress_response(outcome.progress),
        )
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"submit attempt to study session {session_id}", e) from e


@router.post("/{session_id}/finish", response_model=StudyResultsResponse)
def finish_study_session(
    session_id: str,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> StudyResultsResponse:
    """
    Finish a session and get its results.

    Words never recalled are listed as missed. The session is closed
    afterwards; its summary stays available under the list's results.
    """
    try:
        summary = use_case.finish_session(session_id, current_user.id.value)
        return to_results_response(summary)
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"finish study session {session_id}", e) from e


@router.delete("/{session_id}", response_model=SuccessResponse)
def abandon_study_session(
    session_id: str,
    current_user: CurrentUser,
    use_case: StudyUseCase = Depends(inject_use_case(container.study_use_case)),
) -> SuccessResponse:
    """Drop a session without recording results."""
    try:
        use_case.abandon_session(session_id, current_user.id.value)
        return SuccessResponse(success=True, message="Study session abandoned")
    except (WordRecallError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"abandon study session {session_id}", e) from e
