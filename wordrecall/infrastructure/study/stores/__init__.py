from .results_store import InMemoryResultsStore
from .study_session_store import InMemoryStudySessionStore

__all__ = [
    "InMemoryResultsStore",
    "InMemoryStudySessionStore",
]
