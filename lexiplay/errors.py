from __future__ import annotations
from typing import Any, Dict, List, Optional

# Failures raised by the dictionary, level and scoring layers.
# They carry the offending field so callers can build their own error payloads.


class LexiplayError(Exception):
    field: Optional[str] = None

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if field is not None:
            self.field = field

    def details(self) -> List[Dict[str, Any]]:
        if not self.field:
            return []
        return [{ 'field': self.field, 'message': self.reason }]

    @property
    def reason(self) -> str:
        return self.message


class LanguageNotSupported(LexiplayError):
    field = 'lang'

    def __init__(self, language: str):
        super().__init__(f"Language {language} is not supported")
        self.language = language

    @property
    def reason(self) -> str:
        return 'is not supported'


class LevelNotFound(LexiplayError):
    field = 'level'

    def __init__(self, language: str, level: int):
        super().__init__(f"Level {level} does not exist for language {language}")
        self.language = language
        self.level = level

    @property
    def reason(self) -> str:
        return 'does not exist'


class StepNotApplicable(LexiplayError):
    field = 'level'

    def __init__(self, language: str, level: int, step_type: str):
        super().__init__(f"Level {level} for language {language} has no {step_type} step")
        self.language = language
        self.level = level
        self.step_type = step_type

    @property
    def reason(self) -> str:
        return f'has no {self.step_type} step'


class LevelRestricted(LexiplayError):
    field = 'level'

    def __init__(self, level: int):
        super().__init__(f"Level {level} is not allowed to unauthenticated users")
        self.level = level

    @property
    def reason(self) -> str:
        return 'is not allowed for unauthenticated users'


class MalformedDataSource(LexiplayError):
    def __init__(self, language: str, source: Any, reason: str):
        super().__init__(f"Malformed data source for language {language} ({source}): {reason}")
        self.language = language
        self.source = source
        self.detail = reason
