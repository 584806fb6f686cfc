import pytest

from lexiplay.errors import LevelNotFound, MalformedDataSource
from lexiplay.levels import FIND_WORDS, FindWordsStep, GenericStep, LevelRegistry


def test_get_level(levels):
    level = levels.get("en", 1)
    assert level.letter == "a"
    assert len(level.steps) == 1
    step = level.steps[0]
    assert isinstance(step, FindWordsStep)
    assert (step.type, step.rewardPerWord, step.required) == ("findWords", 10, 2)


def test_letter_is_lowercased(levels):
    assert levels.get("en", 2).letter == "b"


def test_levels_are_sparse(levels):
    assert levels.levels("en") == [1, 2, 7, 9]
    with pytest.raises(LevelNotFound) as exc:
        levels.get("en", 3)
    assert exc.value.level == 3


def test_unknown_language_is_level_not_found(levels):
    with pytest.raises(LevelNotFound):
        levels.get("fr", 1)
    assert levels.levels("fr") == []


def test_unknown_step_types_are_kept(levels):
    level = levels.get("en", 7)
    assert isinstance(level.steps[0], GenericStep)
    assert level.steps[0].type == "matchPairs"
    assert level.step(FIND_WORDS) is None


def test_first_matching_step_wins(levels):
    step = levels.get("en", 9).step(FIND_WORDS)
    assert isinstance(step, FindWordsStep)
    assert step.rewardPerWord == 1
    assert step.required == 1


@pytest.mark.parametrize(
    "source",
    [
        ["not", "a", "mapping"],
        {"one": {"letter": "a", "steps": []}},
        {"1": {"letter": "ab", "steps": []}},
        {"1": {"letter": "a", "steps": [{"type": "findWords", "rewardPerWord": -1, "required": 1}]}},
        {"1": {"letter": "a", "steps": [{"type": "findWords", "rewardPerWord": 5}]}},
        {"1": {"letter": "a", "steps": []}, "01": {"letter": "z", "steps": []}},
        {"01": {"letter": "a", "steps": []}},
        {"-1": {"letter": "a", "steps": []}},
        {1: {"letter": "a", "steps": []}, "1": {"letter": "z", "steps": []}},
    ],
)
def test_malformed_levels(source):
    registry = LevelRegistry()
    with pytest.raises(MalformedDataSource):
        registry.load("en", source)
    assert registry.languages() == []


def test_sealed_registry_refuses_new_languages(levels):
    levels.seal()
    assert levels.sealed
    with pytest.raises(RuntimeError):
        levels.load("de", {"1": {"letter": "a", "steps": []}})
    assert levels.languages() == ["en"]
    assert levels.get("en", 1).letter == "a"
