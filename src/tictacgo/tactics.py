"""
Tactics and simple motifs: immediate wins and blocks.
Notes:
- Both scans simulate one move on a copy and ask the engine whether it ends the game.
- Results are in ascending cell order, so the first entry is the lowest index.
"""
from typing import List, Optional, Sequence

from .engine import WON, evaluate_status
from .game_basics import EMPTY, opponent_of


def immediate_winning_moves(board: Sequence[int], player: int) -> List[int]:
    wins: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = player
        if evaluate_status(b, player).state == WON:
            wins.append(i)
    return wins


def first_winning_move(board: Sequence[int], player: int) -> Optional[int]:
    wins = immediate_winning_moves(board, player)
    return wins[0] if wins else None


def first_blocking_move(board: Sequence[int], player: int) -> Optional[int]:
    """Lowest cell where the opponent of ``player`` would win next move."""
    return first_winning_move(board, opponent_of(player))
