import json

import pytest

from lexiplay.config import Settings
from lexiplay.dictionary import DictionaryStore
from lexiplay.levels import LevelRegistry
from lexiplay.loader import GameStores
from lexiplay.managers.scoring import ScoringEngine

EN_WORDS = ["apple", "ant", "banana", "anchor", "Apricot", "arrow", "autumn", "avocado", "axe"]

EN_LEVELS = {
    "1": {"letter": "a", "steps": [{"type": "findWords", "rewardPerWord": 10, "required": 2}]},
    "2": {"letter": "B", "steps": [{"type": "findWords", "rewardPerWord": 2.5, "required": 0}]},
    "7": {"letter": "a", "steps": [{"type": "matchPairs", "pairs": 3}]},
    "9": {
        "letter": "a",
        "steps": [
            {"type": "matchPairs", "pairs": 3},
            {"type": "findWords", "rewardPerWord": 1, "required": 1},
            {"type": "findWords", "rewardPerWord": 100, "required": 50},
        ],
    },
}


@pytest.fixture
def dictionary():
    store = DictionaryStore()
    store.load("en", EN_WORDS)
    store.load("fr", {"arbre": True, "avion": True, "pomme": True, "absent": False})
    return store


@pytest.fixture
def levels():
    registry = LevelRegistry()
    registry.load("en", EN_LEVELS)
    return registry


@pytest.fixture
def engine(dictionary, levels):
    return ScoringEngine(dictionary, levels)


@pytest.fixture
def stores(dictionary, levels, engine):
    return GameStores(dictionary=dictionary, levels=levels, engine=engine)


@pytest.fixture
def data_dirs(tmp_path):
    dict_dir = tmp_path / "dictionaries"
    games_dir = tmp_path / "games"
    dict_dir.mkdir()
    games_dir.mkdir()
    (dict_dir / "en.json").write_text(json.dumps(EN_WORDS), encoding="utf-8")
    (games_dir / "en.json").write_text(json.dumps(EN_LEVELS), encoding="utf-8")
    return dict_dir, games_dir


@pytest.fixture
def settings(data_dirs):
    dict_dir, games_dir = data_dirs
    return Settings(dictionary_dir=str(dict_dir), games_dir=str(games_dir), demo_max_level=5)
