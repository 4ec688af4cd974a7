"""
Computer opponent: a fixed heuristic ladder with difficulty tiers.

easy   - uniform random over empty cells
medium - per move, a coin flip between easy and hard
hard   - win now, block, center, random corner, random edge, random anything

Randomness is drawn from a ``numpy.random.Generator`` handed in by the caller,
so tests can pin it with a seed or a stub exposing ``random()``/``choice()``.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from .errors import NoLegalMove
from .game_basics import CENTER, CORNERS, EDGES, EMPTY, O, legal_moves, mark_name
from .tactics import first_blocking_move, first_winning_move

MEDIUM_RANDOM_RATE = 0.5


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (expected one of: {choices})") from None


def _pick(rng: np.random.Generator, cells: Sequence[int]) -> int:
    return int(rng.choice(list(cells)))


def heuristic_move(board: Sequence[int], rng: np.random.Generator, computer_mark: int = O) -> int:
    """The hard-tier ladder; first applicable rule wins."""
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMove("Board is full")

    win = first_winning_move(board, computer_mark)
    if win is not None:
        logging.debug("opponent %s: win at %d", mark_name(computer_mark), win)
        return win

    block = first_blocking_move(board, computer_mark)
    if block is not None:
        logging.debug("opponent %s: block at %d", mark_name(computer_mark), block)
        return block

    if board[CENTER] == EMPTY:
        return CENTER

    corners: List[int] = [c for c in CORNERS if board[c] == EMPTY]
    if corners:
        return _pick(rng, corners)

    edges: List[int] = [e for e in EDGES if board[e] == EMPTY]
    if edges:
        return _pick(rng, edges)

    # Unreachable while corners, edges and center cover the board.
    return _pick(rng, moves)


def choose_move(
    board: Sequence[int],
    difficulty: "str | Difficulty",
    rng: Optional[np.random.Generator] = None,
    computer_mark: int = O,
) -> int:
    """Select an empty cell for ``computer_mark`` to play.

    Raises ``NoLegalMove`` when the board has no empty cell.
    """
    level = Difficulty.parse(difficulty)
    if rng is None:
        rng = np.random.default_rng()
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMove("Board is full")

    if level is Difficulty.EASY:
        return _pick(rng, moves)
    if level is Difficulty.MEDIUM and rng.random() < MEDIUM_RANDOM_RATE:
        logging.debug("opponent %s: medium coin flip chose random play", mark_name(computer_mark))
        return _pick(rng, moves)
    return heuristic_move(board, rng, computer_mark)
