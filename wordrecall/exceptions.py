"""Custom exception hierarchy for the wordrecall application."""

from fastapi import HTTPException
from starlette import status


class WordRecallError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordRecallError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class WordListNotFoundError(NotFoundError):
    """Word list not found error."""

    def __init__(self, word_list_id: int | None = None) -> None:
        self.word_list_id = word_list_id
        if word_list_id is not None:
            super().__init__(f"Word list with id {word_list_id} not found")
        else:
            super().__init__("Word list not found")


class StudySessionNotFoundError(NotFoundError):
    """Study session not found, expired or owned by another user."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Study session {session_id} not found")


class ResultsNotFoundError(NotFoundError):
    """No finished study session for this list yet."""

    def __init__(self, word_list_id: int) -> None:
        self.word_list_id = word_list_id
        super().__init__(f"No study results found for word list {word_list_id}")


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
