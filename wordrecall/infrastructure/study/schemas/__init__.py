"""Study context schemas."""

from wordrecall.infrastructure.study.schemas.study_schemas import (
    AttemptRequest,
    AttemptResponse,
    FeedbackSchema,
    StudyProgressResponse,
    StudyResultsResponse,
    WordEntrySchema,
)
from wordrecall.infrastructure.study.schemas.word_list_schemas import (
    WordListDetails,
    WordListOwner,
    WordListRequest,
    WordListsResponse,
    WordListSummary,
    WordsTextResponse,
)

__all__ = [
    "AttemptRequest",
    "AttemptResponse",
    "FeedbackSchema",
    "StudyProgressResponse",
    "StudyResultsResponse",
    "WordEntrySchema",
    "WordListDetails",
    "WordListOwner",
    "WordListRequest",
    "WordListSummary",
    "WordListsResponse",
    "WordsTextResponse",
]
