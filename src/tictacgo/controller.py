"""
Game session: wires player input, the computer opponent and the running score.

The session owns the only mutable game state. Moves go through
``engine.apply_move``; when it becomes the computer's turn a move is queued on
the event loop after ``config.ai_delay`` seconds. Every transition (move,
reset, difficulty change) cancels the queued move first, and a queued move
that still fires checks that the position it was scheduled for is current.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np

from .config import GameConfig
from .engine import GameStatus, apply_move, new_board, next_turn
from .errors import GameOver, OutOfTurn
from .game_basics import X, Board, WinLine, mark_name
from .opponent import Difficulty, choose_move
from .scheduling import EventLoop, ScheduledCall
from .scoring import ScoreBoard

Snapshot = Tuple[int, Board, int]


class GameSession:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        loop: Optional[EventLoop] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self.loop = loop if loop is not None else EventLoop()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.scores = ScoreBoard()
        self._pending: Optional[ScheduledCall] = None
        self._generation = 0
        self._reset_position()
        self._schedule_computer_if_due()

    # read-only projections

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def last_move(self) -> Optional[int]:
        return self._last_move

    @property
    def winning_line(self) -> Optional[WinLine]:
        return self._status.line

    @property
    def difficulty(self) -> Difficulty:
        return self.config.difficulty

    @property
    def computer_pending(self) -> bool:
        return self._pending is not None and self._pending.active

    def is_computer_turn(self) -> bool:
        return self.config.vs_computer and self._turn == self.config.computer_mark

    # operations

    def new_game(self) -> Tuple[Board, int, ScoreBoard]:
        """Start a fresh game. Scores carry over."""
        self._cancel_pending()
        self._reset_position()
        if self.config.vs_computer:
            logging.info("New game against the computer (%s difficulty)", self.difficulty.value)
        else:
            logging.info("New two-player game. X goes first!")
        self._schedule_computer_if_due()
        return self._board, self._turn, self.scores

    def player_move(self, cell: int) -> GameStatus:
        if self._status.is_terminal:
            raise GameOver("Game is already over")
        if self.is_computer_turn():
            raise OutOfTurn(f"It is the computer's turn ({mark_name(self._turn)})")
        return self._play(cell)

    def computer_move(self) -> int:
        if not self.config.vs_computer:
            raise OutOfTurn("No computer player in a two-player game")
        if self._status.is_terminal:
            raise GameOver("Game is already over")
        if self._turn != self.config.computer_mark:
            raise OutOfTurn(f"It is the human player's turn ({mark_name(self._turn)})")
        cell = choose_move(self._board, self.difficulty, self.rng, self.config.computer_mark)
        logging.info("Computer (%s) plays %d", mark_name(self._turn), cell)
        self._play(cell)
        return cell

    def set_difficulty(self, difficulty: "str | Difficulty") -> None:
        self.config = self.config.with_overrides(difficulty=difficulty)
        logging.debug("difficulty set to %s", self.difficulty.value)
        if self.computer_pending:
            self._schedule_computer_if_due()

    # internals

    def _reset_position(self) -> None:
        self._board = new_board()
        self._turn = X
        self._status = GameStatus.playing()
        self._last_move: Optional[int] = None
        self._generation += 1

    def _snapshot(self) -> Snapshot:
        return (self._generation, self._board, self._turn)

    def _play(self, cell: int) -> GameStatus:
        board, status = apply_move(self._board, self._turn, cell, self._status)
        self._cancel_pending()
        self._board = board
        self._status = status
        self._last_move = int(cell)
        self._turn = next_turn(self._turn)
        self._generation += 1
        if status.is_terminal:
            self.scores.record(status)
            logging.info(status.describe())
        else:
            self._schedule_computer_if_due()
        return status

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            if self._pending.active:
                logging.debug("cancelled pending computer move #%d", self._pending.seq)
            self._pending.cancel()
            self._pending = None

    def _schedule_computer_if_due(self) -> None:
        self._cancel_pending()
        if self._status.is_terminal or not self.is_computer_turn():
            return
        snapshot = self._snapshot()
        self._pending = self.loop.call_later(self.config.ai_delay, lambda: self._fire_pending(snapshot))

    def _fire_pending(self, snapshot: Snapshot) -> None:
        self._pending = None
        if snapshot != self._snapshot():
            logging.debug("discarded stale computer move")
            return
        self.computer_move()
