"""Protocol for the keyed store of in-flight study sessions."""

from contextlib import AbstractContextManager
from typing import Protocol

from wordrecall.domain.common.value_objects.ids import UserId
from wordrecall.domain.study.services.study_session import StudySession


class StudySessionStoreProtocol(Protocol):
    def add(self, user_id: UserId, session: StudySession) -> str:
        """Keep a session for user_id and return its new opaque id."""
        ...

    def locked(
        self, session_id: str, user_id: UserId
    ) -> AbstractContextManager[StudySession | None]:
        """Give exclusive use of the session for a block, or None if it is gone."""
        ...

    def remove(self, session_id: str, user_id: UserId) -> bool:
        """Drop a session. Returns False if there was nothing to drop."""
        ...
