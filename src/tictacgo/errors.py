"""Rejections raised by the engine, the opponent and the session."""


class MoveRejected(Exception):
    """A move request that was refused. State is never modified on rejection."""

    reason = "rejected"


class InvalidCell(MoveRejected, ValueError):
    """Cell index is out of range or already occupied."""

    reason = "invalid_cell"

    def __init__(self, cell: object, detail: str = "") -> None:
        self.cell = cell
        msg = f"Invalid cell {cell!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class GameOver(MoveRejected):
    """Move attempted after the game reached a win or a draw."""

    reason = "game_over"


class OutOfTurn(MoveRejected):
    """Move attempted by the side that is not to move."""

    reason = "out_of_turn"


class NoLegalMove(MoveRejected):
    """Opponent asked to move on a full board."""

    reason = "no_legal_move"


class ConfigError(ValueError):
    pass
