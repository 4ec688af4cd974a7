import pytest

from tictacgo.config import DEFAULT_AI_DELAY_MS, GameConfig
from tictacgo.errors import ConfigError
from tictacgo.game_basics import O
from tictacgo.opponent import Difficulty


def test_defaults():
    cfg = GameConfig.from_env({})
    assert cfg.mode == "ai"
    assert cfg.vs_computer
    assert cfg.difficulty is Difficulty.MEDIUM
    assert cfg.ai_delay_ms == DEFAULT_AI_DELAY_MS
    assert cfg.ai_delay == pytest.approx(0.6)
    assert cfg.computer_mark == O
    assert cfg.seed is None


def test_env_values():
    cfg = GameConfig.from_env({
        "TTT_MODE": "Human",
        "TTT_DIFFICULTY": "hard",
        "TTT_AI_DELAY_MS": "0",
        "TTT_SEED": "42",
    })
    assert cfg.mode == "human" and not cfg.vs_computer
    assert cfg.difficulty is Difficulty.HARD
    assert cfg.ai_delay_ms == 0
    assert cfg.seed == 42


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TTT_DIFFICULTY", "easy")
    monkeypatch.delenv("TTT_MODE", raising=False)
    assert GameConfig.from_env().difficulty is Difficulty.EASY


def test_overrides_skip_none():
    cfg = GameConfig.from_env({"TTT_DIFFICULTY": "easy"})
    out = cfg.with_overrides(difficulty=None, ai_delay_ms=100)
    assert out.difficulty is Difficulty.EASY
    assert out.ai_delay_ms == 100


@pytest.mark.parametrize("env", [
    {"TTT_MODE": "online"},
    {"TTT_DIFFICULTY": "nightmare"},
    {"TTT_AI_DELAY_MS": "soon"},
    {"TTT_AI_DELAY_MS": "-5"},
    {"TTT_SEED": "abc"},
])
def test_bad_env_values(env):
    with pytest.raises(ConfigError):
        GameConfig.from_env(env)


def test_bad_computer_mark():
    with pytest.raises(ConfigError):
        GameConfig(computer_mark=0).validate()
