"""
Game engine: move application, turn order and terminal-state detection.

Every function here is pure. Boards go in as sequences and come out as new
tuples; nothing is cached or mutated, so callers can evaluate hypothetical
positions freely (the opponent does exactly that).
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

from .errors import GameOver, InvalidCell
from .game_basics import (
    EMPTY,
    MARKS,
    Board,
    WinLine,
    is_full,
    mark_name,
    opponent_of,
    winning_line,
)

PLAYING = "playing"
WON = "won"
DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    state: str = PLAYING
    winner: Optional[int] = None
    line: Optional[WinLine] = None

    @classmethod
    def playing(cls) -> "GameStatus":
        return cls(PLAYING)

    @classmethod
    def won(cls, winner: int, line: WinLine) -> "GameStatus":
        return cls(WON, winner, line)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.state != PLAYING

    def describe(self) -> str:
        if self.state == WON:
            return f"Player {mark_name(self.winner)} wins!"
        if self.state == DRAW:
            return "It's a draw!"
        return "Game in progress"


class MoveResult(NamedTuple):
    board: Board
    status: GameStatus


def new_board() -> Board:
    return (EMPTY,) * 9


def next_turn(mark: int) -> int:
    return opponent_of(mark)


def evaluate_status(board: Sequence[int], last_mark: int) -> GameStatus:
    """Status of ``board`` right after ``last_mark`` played.

    Only lines of ``last_mark`` are considered; the first completed line in
    row, column, diagonal order is reported.
    """
    if last_mark not in MARKS:
        raise ValueError(f"Not a player mark: {last_mark!r}")
    line = winning_line(board, last_mark)
    if line is not None:
        return GameStatus.won(last_mark, line)
    if is_full(board):
        return GameStatus.draw()
    return GameStatus.playing()


def _already_over(board: Sequence[int]) -> bool:
    return is_full(board) or any(winning_line(board, m) is not None for m in MARKS)


def apply_move(
    board: Sequence[int],
    turn: int,
    cell: int,
    status: Optional[GameStatus] = None,
) -> MoveResult:
    """Place ``turn``'s mark at ``cell`` and evaluate the resulting position.

    Raises ``GameOver`` if the game is already decided (taken from ``status``
    when given, otherwise read off the board), then ``InvalidCell`` if ``cell``
    is out of range or occupied. The input board is left untouched.
    """
    if len(board) != 9:
        raise ValueError(f"Board must have 9 cells, got {len(board)}")
    if turn not in MARKS:
        raise ValueError(f"Not a player mark: {turn!r}")
    over = status.is_terminal if status is not None else _already_over(board)
    if over:
        raise GameOver("Game is already over")
    # Any integer type (numpy included) is accepted; bools are not cells.
    if isinstance(cell, bool):
        raise InvalidCell(cell, "must be an index in 0-8")
    try:
        idx = operator.index(cell)
    except TypeError:
        raise InvalidCell(cell, "must be an index in 0-8") from None
    if not 0 <= idx < 9:
        raise InvalidCell(cell, "must be an index in 0-8")
    if board[idx] != EMPTY:
        raise InvalidCell(cell, f"already occupied by {mark_name(board[idx])}")
    cells = list(board)
    cells[idx] = turn
    new = tuple(cells)
    return MoveResult(new, evaluate_status(new, turn))
