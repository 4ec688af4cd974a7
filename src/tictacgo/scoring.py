"""Running score for a session of consecutive games."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .engine import DRAW, WON, GameStatus
from .game_basics import X


@dataclass
class ScoreBoard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, status: GameStatus) -> None:
        """Count one finished game. Playing statuses are refused."""
        if status.state == WON:
            if status.winner == X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif status.state == DRAW:
            self.draws += 1
        else:
            raise ValueError("Cannot record a game that is still in progress")

    def reset(self) -> None:
        self.x_wins = self.o_wins = self.draws = 0

    @property
    def games_played(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def as_dict(self) -> Dict[str, int]:
        return {"X": self.x_wins, "O": self.o_wins, "draw": self.draws}
