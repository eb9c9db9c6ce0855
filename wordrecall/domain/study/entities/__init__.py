from .word_entry import WordEntry
from .word_list import WordList

__all__ = ["WordEntry", "WordList"]
