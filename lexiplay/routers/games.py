from fastapi import APIRouter, Depends

from ..config import Settings
from ..errors import LanguageNotSupported, LevelRestricted
from ..loader import GameStores
from ..schemas import LevelInfo, ScoringResult, Submission
from .deps import get_settings, get_stores

router = APIRouter(prefix="/games", tags=["games"])


def _level_info(stores: GameStores, lang: str, level: int) -> LevelInfo:
    if not stores.dictionary.supports(lang):
        raise LanguageNotSupported(lang)
    definition = stores.levels.get(lang, level)
    return LevelInfo(level=level, letter=definition.letter, steps=definition.steps)


@router.get("/lang/{lang}/level/{level}", response_model=LevelInfo)
async def level_settings(lang: str, level: int, stores: GameStores = Depends(get_stores)):
    return _level_info(stores, lang, level)


@router.get("/demo/lang/{lang}/level/{level}", response_model=LevelInfo)
async def demo_level_settings(
    lang: str,
    level: int,
    stores: GameStores = Depends(get_stores),
    settings: Settings = Depends(get_settings),
):
    # Demo players only get the first few levels
    if level >= settings.demo_max_level:
        raise LevelRestricted(level)
    return _level_info(stores, lang, level)


@router.post("/lang/{lang}/level/{level}/play", response_model=ScoringResult)
async def play(lang: str, level: int, body: Submission, stores: GameStores = Depends(get_stores)):
    return stores.engine.score(lang, level, body.words)
