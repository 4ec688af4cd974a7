from __future__ import annotations

import argparse
import logging
from typing import Callable

import numpy as np

from .config import MODES, GameConfig
from .controller import GameSession
from .engine import evaluate_status
from .errors import ConfigError, MoveRejected
from .game_basics import (
    O,
    X,
    deserialize_board,
    is_valid_state,
    mark_name,
    opponent_of,
    pretty,
    serialize_board,
    side_to_move,
)
from .opponent import Difficulty, choose_move
from .tactics import immediate_winning_moves

INDEX_MAP = "Index map:\n0 | 1 | 2\n3 | 4 | 5\n6 | 7 | 8\n"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="TicTacGo: tic-tac-toe against a friend or the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer opponent (env: TTT_SEED)")

    difficulties = [d.value for d in Difficulty]

    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument("--mode", choices=list(MODES), default=None, help="ai (default) or human (env: TTT_MODE)")
    p_play.add_argument(
        "--difficulty", choices=difficulties, default=None, help="Computer difficulty (env: TTT_DIFFICULTY)"
    )
    p_play.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help="Pause before the computer moves, in milliseconds (env: TTT_AI_DELAY_MS)",
    )

    p_status = sub.add_parser(
        "status",
        help="Evaluate a board (9 chars of 0/1/2 or ./x/o, e.g. 100020000)",
    )
    p_status.add_argument("--board", required=True, help="Board string")

    p_sug = sub.add_parser("suggest", help="Ask the computer opponent for a move on a board")
    p_sug.add_argument("--board", required=True, help="Board string")
    p_sug.add_argument("--difficulty", choices=difficulties, default="hard")
    p_sug.add_argument("--mark", choices=["X", "O"], default=None, help="Side to play (default: side to move)")

    return p


def _print_info() -> None:
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"numpy={np.__version__}")


def _load_board(raw: str):
    try:
        b = deserialize_board(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def run_play(session: GameSession, read: Callable[[str], str] = input) -> int:
    """Drive ``session`` from terminal input until the player quits."""
    print(INDEX_MAP)
    while True:
        if session.computer_pending:
            session.loop.run_once()
            continue
        print(pretty(session.board))
        print()
        status = session.status
        if status.is_terminal:
            s = session.scores
            print(f"{status.describe()}  Score: X {s.x_wins} | draws {s.draws} | O {s.o_wins} ({s.games_played} played)")
            prompt = "[n]ew game or [q]uit: "
        else:
            prompt = f"Play {mark_name(session.turn)} at [0-8] (n=new game, q=quit): "
        try:
            raw = read(prompt).strip().lower()
        except EOFError:
            return 0
        if raw in ("q", "quit"):
            return 0
        if raw in ("n", "new"):
            session.new_game()
            continue
        if status.is_terminal or not raw:
            continue
        try:
            cell = int(raw)
        except ValueError:
            logging.warning("Please type a number 0..8.")
            continue
        try:
            session.player_move(cell)
        except MoveRejected as exc:
            logging.warning("Illegal move: %s", exc)


def main(argv: list[str] | None = None, read: Callable[[str], str] = input) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictacgo"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        try:
            cfg = GameConfig.from_env().with_overrides(
                mode=ns.mode,
                difficulty=ns.difficulty,
                ai_delay_ms=ns.delay_ms,
                seed=ns.seed,
            )
        except ConfigError as exc:
            logging.error("Invalid configuration: %s", exc)
            return 2
        if ns.verbose:
            logging.info("config=%s", cfg)
        session = GameSession(cfg)
        if cfg.vs_computer:
            logging.info("Starting game against the computer (%s difficulty)", cfg.difficulty.value)
        else:
            logging.info("Starting a 2-player game. X goes first!")
        return run_play(session, read)

    if ns.cmd == "status":
        b = _load_board(ns.board)
        if b is None:
            return 2
        p = side_to_move(b)
        status = evaluate_status(b, opponent_of(p))
        logging.info(
            "status=%s winner=%s line=%s to_move=%s wins=%s",
            status.state,
            mark_name(status.winner) if status.winner is not None else "-",
            list(status.line) if status.line else "-",
            mark_name(p),
            immediate_winning_moves(b, p),
        )
        return 0

    if ns.cmd == "suggest":
        b = _load_board(ns.board)
        if b is None:
            return 2
        if evaluate_status(b, opponent_of(side_to_move(b))).is_terminal:
            logging.error("Game is already over on this board.")
            return 2
        mark = side_to_move(b) if ns.mark is None else (X if ns.mark == "X" else O)
        rng = np.random.default_rng(ns.seed)
        move = choose_move(b, ns.difficulty, rng, mark)
        logging.info(
            "board=%s mark=%s difficulty=%s move=%d", serialize_board(b), mark_name(mark), ns.difficulty, move
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
