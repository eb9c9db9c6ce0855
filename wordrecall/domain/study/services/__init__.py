from .list_parser import ListParser
from .study_session import (
    Feedback,
    FeedbackType,
    ResultsSummary,
    SessionStatus,
    StudySession,
    percent_rounded,
)

__all__ = [
    "Feedback",
    "FeedbackType",
    "ListParser",
    "ResultsSummary",
    "SessionStatus",
    "StudySession",
    "percent_rounded",
]
