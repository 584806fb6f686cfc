from typing import Dict

from fastapi import APIRouter, Depends

from ..loader import GameStores
from ..schemas import LanguagesInfo, WordCheck, WordsCheck
from .deps import get_stores

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=LanguagesInfo)
async def list_languages(stores: GameStores = Depends(get_stores)):
    languages = stores.dictionary.languages()
    return LanguagesInfo(languages=languages, count=len(languages))


@router.get("/{lang}/check/{word}", response_model=WordCheck)
async def check_word(lang: str, word: str, stores: GameStores = Depends(get_stores)):
    return WordCheck(word=word, result=stores.dictionary.contains(lang, word))


@router.post("/{lang}/check/multiple", response_model=Dict[str, bool])
async def check_words(lang: str, body: WordsCheck, stores: GameStores = Depends(get_stores)):
    return stores.dictionary.contains_many(lang, body.words)
