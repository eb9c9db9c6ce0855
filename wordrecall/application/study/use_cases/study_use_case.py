"""Use case for running study sessions over word lists."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from wordrecall.application.study.dtos import AttemptOutcome, SessionProgress
from wordrecall.application.study.protocols import (
    ResultsStoreProtocol,
    StudySessionStoreProtocol,
    WordListRepositoryProtocol,
)
from wordrecall.domain.common.value_objects.ids import UserId, WordListId
from wordrecall.domain.study.services.study_session import ResultsSummary, StudySession
from wordrecall.exceptions import (
    ResultsNotFoundError,
    StudySessionNotFoundError,
    WordListNotFoundError,
)

logger = structlog.get_logger(__name__)


class StudyUseCase:
    """
    Start, drive and finish free-recall study sessions.

    The word list is read once when a session starts; later edits to the
    list don't reach sessions already running.
    """

    def __init__(
        self,
        word_list_repository: WordListRepositoryProtocol,
        session_store: StudySessionStoreProtocol,
        results_store: ResultsStoreProtocol,
        recent_limit: int = 20,
    ) -> None:
        self.word_list_repository = word_list_repository
        self.session_store = session_store
        self.results_store = results_store
        self.recent_limit = recent_limit

    @contextmanager
    def _locked_session(self, session_id: str, user_id: int) -> Iterator[StudySession]:
        with self.session_store.locked(session_id, UserId(user_id)) as session:
            if session is None:
                raise StudySessionNotFoundError(session_id)
            yield session

    def _progress(self, session_id: str, session: StudySession) -> SessionProgress:
        return SessionProgress(
            session_id=session_id,
            word_list_id=session.word_list_id,
            list_name=session.list_name,
            status=session.status,
            remembered_count=len(session.remembered),
            total_words=session.total_words,
            progress_percent=session.progress_percent,
            incorrect_count=len(session.incorrect_attempts),
            recently_remembered=session.recently_remembered(self.recent_limit),
        )

    def start_session(self, word_list_id: int, user_id: int) -> SessionProgress:
        """
        Snapshot a word list into a new study session.

        Raises:
            WordListNotFoundError: If the list doesn't exist
            ConfigurationError: If the list has no words
        """
        word_list = self.word_list_repository.find_by_id(WordListId(word_list_id))
        if not word_list:
            raise WordListNotFoundError(word_list_id)

        session = StudySession.from_word_list(word_list)
        session_id = self.session_store.add(UserId(user_id), session)

        logger.info(
            "study_session_started",
            session_id=session_id,
            word_list_id=word_list_id,
            user_id=user_id,
            total_words=session.total_words,
        )
        return self._progress(session_id, session)

    def get_progress(self, session_id: str, user_id: int) -> SessionProgress:
        """
        Raises:
            StudySessionNotFoundError: If the session is unknown, expired or not the user's
        """
        with self._locked_session(session_id, user_id) as session:
            return self._progress(session_id, session)

    def submit_attempt(self, session_id: str, user_id: int, raw_input: str) -> AttemptOutcome:
        """
        Submit one recalled word.

        A wrong word is ordinary feedback, not an error.

        Raises:
            StudySessionNotFoundError: If the session is unknown, expired or not the user's
        """
        with self._locked_session(session_id, user_id) as session:
            feedback = session.submit(raw_input)
            progress = self._progress(session_id, session)

        if feedback is not None:
            logger.debug(
                "study_attempt",
                session_id=session_id,
                feedback=feedback.type.value,
                word=feedback.word,
            )
        return AttemptOutcome(feedback=feedback, progress=progress)

    def finish_session(self, session_id: str, user_id: int) -> ResultsSummary:
        """
        Finish a session, keep its summary as the latest result for the list.

        Raises:
            StudySessionNotFoundError: If the session is unknown, expired or not the user's
        """
        with self._locked_session(session_id, user_id) as session:
            summary = session.finish()
            if session.word_list_id is not None:
                self.results_store.save(
                    UserId(user_id), WordListId(session.word_list_id), summary
                )
            self.session_store.remove(session_id, UserId(user_id))

        logger.info(
            "study_session_finished",
            session_id=session_id,
            word_list_id=session.word_list_id,
            user_id=user_id,
            score=summary.score,
            remembered=len(summary.remembered),
            missed=len(summary.missed),
            incorrect=len(summary.incorrect),
        )
        return summary

    def abandon_session(self, session_id: str, user_id: int) -> None:
        """
        Drop a session without producing results.

        Raises:
            StudySessionNotFoundError: If the session is unknown, expired or not the user's
        """
        if not self.session_store.remove(session_id, UserId(user_id)):
            raise StudySessionNotFoundError(session_id)
        logger.info("study_session_abandoned", session_id=session_id, user_id=user_id)

    def get_latest_results(self, word_list_id: int, user_id: int) -> ResultsSummary:
        """
        Raises:
            ResultsNotFoundError: If the user hasn't finished a session on this list
        """
        summary = self.results_store.get(UserId(user_id), WordListId(word_list_id))
        if summary is None:
            raise ResultsNotFoundError(word_list_id)
        return summary
