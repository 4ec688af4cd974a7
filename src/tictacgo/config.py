"""Session configuration.

Environment-first: ``TTT_MODE``, ``TTT_DIFFICULTY``, ``TTT_AI_DELAY_MS`` and
``TTT_SEED`` seed the defaults, command-line flags override them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError
from .game_basics import MARKS, O
from .opponent import Difficulty

MODE_HUMAN = "human"
MODE_AI = "ai"
MODES = (MODE_HUMAN, MODE_AI)

DEFAULT_AI_DELAY_MS = 600


@dataclass(frozen=True)
class GameConfig:
    mode: str = MODE_AI
    difficulty: Difficulty = Difficulty.MEDIUM
    ai_delay_ms: int = DEFAULT_AI_DELAY_MS
    computer_mark: int = O
    seed: Optional[int] = None

    @property
    def vs_computer(self) -> bool:
        return self.mode == MODE_AI

    @property
    def ai_delay(self) -> float:
        return self.ai_delay_ms / 1000.0

    def validate(self) -> "GameConfig":
        if self.mode not in MODES:
            raise ConfigError(f"Unknown game mode {self.mode!r} (expected one of: {', '.join(MODES)})")
        if not isinstance(self.difficulty, Difficulty):
            raise ConfigError(f"Difficulty must be a Difficulty, got {self.difficulty!r}")
        if self.ai_delay_ms < 0:
            raise ConfigError(f"AI delay must be >= 0 ms, got {self.ai_delay_ms}")
        if self.computer_mark not in MARKS:
            raise ConfigError(f"Computer mark must be X or O, got {self.computer_mark!r}")
        return self

    def with_overrides(self, **changes: object) -> "GameConfig":
        """Copy with every non-None value applied, then validated."""
        values = {k: v for k, v in changes.items() if v is not None}
        if "difficulty" in values:
            values["difficulty"] = _parse_difficulty(values["difficulty"])
        return replace(self, **values).validate()

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        env = os.environ if env is None else env
        cfg = cls()
        mode = env.get("TTT_MODE")
        difficulty = env.get("TTT_DIFFICULTY")
        delay = env.get("TTT_AI_DELAY_MS")
        seed = env.get("TTT_SEED")
        return cfg.with_overrides(
            mode=mode.strip().lower() if mode else None,
            difficulty=difficulty or None,
            ai_delay_ms=_parse_int("TTT_AI_DELAY_MS", delay),
            seed=_parse_int("TTT_SEED", seed),
        )


def _parse_difficulty(value: object) -> Difficulty:
    try:
        return Difficulty.parse(value)  # type: ignore[arg-type]
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
