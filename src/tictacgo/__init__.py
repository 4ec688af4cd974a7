"""tictacgo package.

Game engine, heuristic computer opponent, score keeping and a session
controller for 3x3 tic-tac-toe, plus a small terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .config import GameConfig
from .controller import GameSession
from .engine import GameStatus, apply_move, evaluate_status, new_board, next_turn
from .errors import GameOver, InvalidCell, MoveRejected, NoLegalMove, OutOfTurn
from .game_basics import EMPTY, O, WIN_LINES, X
from .opponent import Difficulty, choose_move
from .scoring import ScoreBoard

__all__ = [
    "EMPTY",
    "X",
    "O",
    "WIN_LINES",
    "GameStatus",
    "new_board",
    "apply_move",
    "evaluate_status",
    "next_turn",
    "Difficulty",
    "choose_move",
    "ScoreBoard",
    "GameConfig",
    "GameSession",
    "MoveRejected",
    "InvalidCell",
    "GameOver",
    "OutOfTurn",
    "NoLegalMove",
]
