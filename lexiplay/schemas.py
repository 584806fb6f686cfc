from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Tuple, Union

from .levels import Step

Number = Union[int, float]

class Submission(BaseModel):
    words: List[str] = []

class PlayRequest(Submission):
    # Socket.IO payload: the level key travels with the words
    lang: str
    level: int

class WordsCheck(BaseModel):
    words: List[str] = []

class WordCheck(BaseModel):
    word: str
    result: bool

class LanguagesInfo(BaseModel):
    languages: List[str]
    count: int

class LevelInfo(BaseModel):
    level: int
    letter: str
    steps: Tuple[Step, ...] = ()

class ScoringResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    success: bool
    required: int
    # word as submitted -> valid or not, in submission order
    results: Dict[str, bool]
    someWords: List[str] = []
    score: Number = 0
    total_found: int = 0
    type: str

class ErrorDetail(BaseModel):
    field: str
    message: str

class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
    type: str
    data: List[ErrorDetail] = Field(default_factory=list)
