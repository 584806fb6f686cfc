from __future__ import annotations
from bisect import bisect_left
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

import structlog

from .errors import LanguageNotSupported, MalformedDataSource

logger = structlog.get_logger(__name__)


def normalize(word: str) -> str:
    return word.lower()


class WordSet:
    """Immutable word collection for one language.

    Keeps a frozenset for membership and a sorted tuple so that every word
    sharing a prefix sits in one contiguous run.
    """

    __slots__ = ('_members', '_ordered')

    def __init__(self, words: Iterable[str]):
        # The empty string is never a word
        members = frozenset(w for w in (normalize(x) for x in words) if w)
        self._members = members
        self._ordered = tuple(sorted(members))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize(word) in self._members

    def __len__(self) -> int:
        return len(self._members)

    def with_prefix(self, prefix: str, exclude: frozenset = frozenset(), limit: Optional[int] = None) -> List[str]:
        prefix = normalize(prefix)
        found: List[str] = []
        if limit is not None and limit <= 0:
            return found
        ordered = self._ordered
        for i in range(bisect_left(ordered, prefix), len(ordered)):
            w = ordered[i]
            if not w.startswith(prefix):
                break
            if w in exclude:
                continue
            found.append(w)
            if limit is not None and len(found) >= limit:
                break
        return found


def _words_from_source(language: str, source: Any) -> List[str]:
    # Accept a plain list of words or the {"word": true} object form
    if isinstance(source, Mapping):
        entries = [w for w, flag in source.items() if flag]
    elif isinstance(source, (list, tuple, set, frozenset)):
        entries = list(source)
    else:
        raise MalformedDataSource(language, type(source).__name__, 'expected a list of words or a word object')
    bad = [w for w in entries if not isinstance(w, str)]
    if bad:
        raise MalformedDataSource(language, type(source).__name__, f'{len(bad)} non-string entries')
    return entries


class DictionaryStore:
    def __init__(self):
        self._words: Mapping[str, WordSet] = {}
        self._sealed = False

    def load(self, language: str, source: Any) -> None:
        if self._sealed:
            raise RuntimeError(f"Dictionary store is sealed, cannot load {language}")
        if language in self._words:
            raise ValueError(f"Language {language} is already loaded")
        words = WordSet(_words_from_source(language, source))
        self._words[language] = words
        logger.info('dictionary_loaded', language=language, words=len(words))

    def seal(self) -> None:
        """Stop accepting new languages; the store is read-only from here on."""
        self._words = MappingProxyType(dict(self._words))
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def supports(self, language: str) -> bool:
        return language in self._words

    def languages(self) -> List[str]:
        return sorted(self._words)

    def contains(self, language: str, word: str) -> bool:
        words = self._word_set(language)
        if not word:
            return False
        return word in words

    def contains_many(self, language: str, words: Iterable[str]) -> Dict[str, bool]:
        word_set = self._word_set(language)
        return { w: bool(w) and w in word_set for w in words }

    def words_with_prefix(self, language: str, prefix: str, exclude: Iterable[str] = (), limit: int = 5) -> List[str]:
        word_set = self._word_set(language)
        skip = frozenset(normalize(w) for w in exclude)
        return word_set.with_prefix(prefix, skip, limit)

    def _word_set(self, language: str) -> WordSet:
        try:
            return self._words[language]
        except KeyError:
            raise LanguageNotSupported(language) from None
