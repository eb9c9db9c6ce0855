"""
In-memory store of in-flight study sessions.

Sessions are keyed by an opaque id and tied to the user who started them.
A session that hasn't been touched for the configured TTL is evicted, so
sessions abandoned without an explicit DELETE don't pile up.

Each stored session carries its own lock. Callers that read or change a
session go through `locked()`, so two requests on the same session (two
browser tabs, a double click) run one after the other.
"""

import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import structlog

from wordrecall.domain.common.value_objects.ids import UserId
from wordrecall.domain.study.services.study_session import StudySession

logger = structlog.get_logger(__name__)


@dataclass
class _StoredSession:
    user_id: UserId
    session: StudySession
    last_used_at: datetime
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        return now - self.last_used_at > ttl


class InMemoryStudySessionStore:
    """Thread-safe keyed store of StudySession objects."""

    def __init__(self, ttl_minutes: int = 120) -> None:
        self.ttl = timedelta(minutes=ttl_minutes)
        self._sessions: dict[str, _StoredSession] = {}
        self._lock = threading.Lock()

    def _purge_expired(self, now: datetime) -> None:
        expired = [sid for sid, s in self._sessions.items() if s.is_expired(now, self.ttl)]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("study_sessions_expired", count=len(expired))

    def _touch(self, session_id: str, user_id: UserId) -> _StoredSession | None:
        now = datetime.now(UTC)
        with self._lock:
            self._purge_expired(now)
            stored = self._sessions.get(session_id)
            if stored is None or stored.user_id != user_id:
                return None
            stored.last_used_at = now
            return stored

    def _is_current(self, session_id: str, stored: _StoredSession) -> bool:
        with self._lock:
            return self._sessions.get(session_id) is stored

    def add(self, user_id: UserId, session: StudySession) -> str:
        session_id = uuid.uuid4().hex
        now = datetime.now(UTC)
        with self._lock:
            self._purge_expired(now)
            self._sessions[session_id] = _StoredSession(user_id, session, now)
        return session_id

    @contextmanager
    def locked(self, session_id: str, user_id: UserId) -> Iterator[StudySession | None]:
        """
        Hold the session's lock for the duration of the block.

        Yields None when the session is unknown, expired, owned by someone
        else, or was removed while this caller waited for the lock.
        """
        stored = self._touch(session_id, user_id)
        if stored is None:
            yield None
            return

        with stored.lock:
            yield stored.session if self._is_current(session_id, stored) else None

    def remove(self, session_id: str, user_id: UserId) -> bool:
        with self._lock:
            stored = self._sessions.get(session_id)
            if stored is None or stored.user_id != user_id:
                return False
            del self._sessions[session_id]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
