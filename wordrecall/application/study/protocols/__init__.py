from .results_store import ResultsStoreProtocol
from .study_session_store import StudySessionStoreProtocol
from .word_list_repository import WordListRepositoryProtocol

__all__ = [
    "ResultsStoreProtocol",
    "StudySessionStoreProtocol",
    "WordListRepositoryProtocol",
]
