from __future__ import annotations
from typing import Dict, List, Optional, Sequence

import structlog

from ..dictionary import DictionaryStore
from ..errors import LanguageNotSupported, StepNotApplicable
from ..levels import FIND_WORDS, FindWordsStep, LevelRegistry
from ..schemas import ScoringResult
from .suggestions import SuggestionGenerator

logger = structlog.get_logger(__name__)

class ScoringEngine:
    """Scores a batch of submitted words against one level's findWords step.

    The engine only borrows the stores; it keeps nothing between calls, so
    one instance can serve concurrent requests.
    """

    def __init__(self, dictionary: DictionaryStore, levels: LevelRegistry,
                 suggestions: Optional[SuggestionGenerator] = None):
        self.dictionary = dictionary
        self.levels = levels
        self.suggestions = suggestions or SuggestionGenerator(dictionary)

    def score(self, language: str, level: int, words: Sequence[str]) -> ScoringResult:
        if not self.dictionary.supports(language):
            raise LanguageNotSupported(language)
        definition = self.levels.get(language, level)
        letter = definition.letter

        # Words with the wrong first letter can never count, skip the dictionary for them
        candidates = [w for w in words if w.lower().startswith(letter)]
        found = self.dictionary.contains_many(language, candidates)
        validity: List[bool] = [found.get(w, False) for w in words]

        step = definition.step(FIND_WORDS)
        if not isinstance(step, FindWordsStep):
            raise StepNotApplicable(language, level, FIND_WORDS)

        results: Dict[str, bool] = {}
        for w, ok in zip(words, validity):
            results[w] = ok  # repeated spellings: last one wins
        total_found = sum(validity)

        some_words = self.suggestions.suggest(language, letter, words)
        logger.debug(
            'words_scored',
            language=language,
            level=level,
            submitted=len(words),
            candidates=len(candidates),
            total_found=total_found,
        )
        return ScoringResult(
            level=level,
            success=total_found >= step.required,
            required=step.required,
            results=results,
            someWords=some_words,
            score=step.rewardPerWord * total_found,
            total_found=total_found,
            type=step.type,
        )
