from __future__ import annotations
from typing import Iterable, List

from ..dictionary import DictionaryStore

SUGGESTION_LIMIT = 5

class SuggestionGenerator:
    """Offers words the player missed: same starting letter, never one they already tried."""

    def __init__(self, dictionary: DictionaryStore, limit: int = SUGGESTION_LIMIT):
        self.dictionary = dictionary
        self.limit = limit

    def suggest(self, language: str, letter: str, submitted: Iterable[str]) -> List[str]:
        return self.dictionary.words_with_prefix(language, letter, exclude=submitted, limit=self.limit)
