from __future__ import annotations
from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter, ValidationError, field_validator

from .errors import LevelNotFound, MalformedDataSource

logger = structlog.get_logger(__name__)

FIND_WORDS = 'findWords'
KNOWN_STEP_TYPES = {FIND_WORDS}


class FindWordsStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal['findWords'] = FIND_WORDS
    rewardPerWord: Union[int, float] = Field(..., ge=0)
    required: int = Field(..., ge=0)


class GenericStep(BaseModel):
    # Step kinds this server does not score yet; extra fields are kept as-is
    model_config = ConfigDict(frozen=True, extra='allow')

    type: str


def _step_tag(value: Any) -> str:
    tag = value.get('type') if isinstance(value, dict) else getattr(value, 'type', None)
    return tag if tag in KNOWN_STEP_TYPES else 'generic'


Step = Annotated[
    Union[
        Annotated[FindWordsStep, Tag(FIND_WORDS)],
        Annotated[GenericStep, Tag('generic')],
    ],
    Discriminator(_step_tag),
]


class LevelDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    letter: str
    steps: Tuple[Step, ...] = ()

    @field_validator('letter')
    @classmethod
    def _single_letter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError('letter must be a single character')
        return v.lower()

    def step(self, step_type: str) -> Optional[Union[FindWordsStep, GenericStep]]:
        """First step carrying the given type tag, or None."""
        return next((s for s in self.steps if s.type == step_type), None)


_levels_adapter = TypeAdapter(Dict[int, LevelDefinition])


def _is_level_key(key: Any) -> bool:
    # "1" and "01" must not both land on level 1
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    return isinstance(key, str) and key.isascii() and key.isdigit() and key == str(int(key))


class LevelRegistry:
    def __init__(self):
        self._levels: Mapping[str, Mapping[int, LevelDefinition]] = {}
        self._sealed = False

    def load(self, language: str, source: Any) -> None:
        if self._sealed:
            raise RuntimeError(f"Level registry is sealed, cannot load {language}")
        if language in self._levels:
            raise ValueError(f"Levels for language {language} are already loaded")
        if not isinstance(source, Mapping):
            raise MalformedDataSource(language, type(source).__name__, 'expected an object of level number to level')
        bad_keys = [k for k in source if not _is_level_key(k)]
        if bad_keys:
            raise MalformedDataSource(language, 'levels', f'non-canonical level numbers: {bad_keys!r}')
        try:
            levels = _levels_adapter.validate_python(source)
        except ValidationError as e:
            raise MalformedDataSource(language, 'levels', f'{e.error_count()} validation errors') from e
        if len(levels) != len(source):
            raise MalformedDataSource(language, 'levels', 'duplicate level numbers')
        self._levels[language] = MappingProxyType(levels)
        logger.info('levels_loaded', language=language, levels=len(levels))

    def seal(self) -> None:
        self._levels = MappingProxyType(dict(self._levels))
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, language: str, level: int) -> LevelDefinition:
        try:
            return self._levels[language][level]
        except KeyError:
            raise LevelNotFound(language, level) from None

    def levels(self, language: str) -> List[int]:
        return sorted(self._levels.get(language, {}))

    def languages(self) -> List[str]:
        return sorted(self._levels)
