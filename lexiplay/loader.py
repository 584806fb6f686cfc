from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterator, Tuple

import structlog

from .config import Settings
from .dictionary import DictionaryStore
from .errors import MalformedDataSource
from .levels import LevelRegistry
from .managers.scoring import ScoringEngine

# Startup loading: one <lang>.json per language in each data directory.
# A broken file only takes its own language out of service.

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GameStores:
    dictionary: DictionaryStore
    levels: LevelRegistry
    engine: ScoringEngine


def _json_files(directory: Path) -> Iterator[Path]:
    if not directory.is_dir():
        logger.warning('data_directory_missing', directory=str(directory))
        return iter(())
    return iter(sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == '.json'))


def read_source(language: str, path: Path) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedDataSource(language, str(path), str(e)) from e


def _load_directory(directory: Path, load: Callable[[str, Any], None]) -> Tuple[int, int]:
    loaded = skipped = 0
    for path in _json_files(directory):
        language = path.stem
        try:
            load(language, read_source(language, path))
        except MalformedDataSource as e:
            skipped += 1
            logger.warning('data_source_skipped', language=language, path=str(path), reason=e.detail)
            continue
        loaded += 1
    return loaded, skipped


def load_dictionaries(directory: str | Path) -> DictionaryStore:
    store = DictionaryStore()
    loaded, skipped = _load_directory(Path(directory), store.load)
    store.seal()
    logger.info('dictionaries_ready', directory=str(directory), loaded=loaded, skipped=skipped)
    return store


def load_levels(directory: str | Path) -> LevelRegistry:
    registry = LevelRegistry()
    loaded, skipped = _load_directory(Path(directory), registry.load)
    registry.seal()
    logger.info('levels_ready', directory=str(directory), loaded=loaded, skipped=skipped)
    return registry


def load_stores(settings: Settings) -> GameStores:
    """Build both stores once, sealed, and the engine that reads them."""
    dictionary = load_dictionaries(settings.dictionary_dir)
    levels = load_levels(settings.games_dir)
    for language in levels.languages():
        if not dictionary.supports(language):
            logger.warning('levels_without_dictionary', language=language)
    return GameStores(dictionary=dictionary, levels=levels, engine=ScoringEngine(dictionary, levels))
