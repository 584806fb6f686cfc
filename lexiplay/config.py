from __future__ import annotations
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings, read from LEXIPLAY_* environment variables or a .env file."""

    model_config = SettingsConfigDict(env_prefix='LEXIPLAY_', env_file='.env', extra='ignore')

    # Data files, one <lang>.json per language
    dictionary_dir: str = 'data/dictionaries'
    games_dir: str = 'data/games'

    # Demo routes only serve the first levels
    demo_max_level: int = 5

    # Logging
    log_level: str = 'INFO'
    log_format: Literal['console', 'json'] = 'console'
    environment: str = 'development'

    cors_allowed_origins: List[str] = Field(default_factory=lambda: ['*'])
