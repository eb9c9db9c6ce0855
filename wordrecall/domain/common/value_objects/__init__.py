from .ids import UserId, WordListId

__all__ = [
    "UserId",
    "WordListId",
]
