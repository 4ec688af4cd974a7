"""
Game basics: board representation, serialization, win lines, legal moves.
Notes:
- A board is a tuple of 9 cells: 0=empty, 1=X, 2=O, laid out row-major. X always starts.
- Functions accept lists or tuples and never mutate their input.
"""
from typing import List, Optional, Sequence, Tuple

EMPTY = 0
X = 1
O = 2

MARKS = (X, O)
MARK_NAMES = {EMPTY: '.', X: 'X', O: 'O'}

Board = Tuple[int, ...]
WinLine = Tuple[int, int, int]

# Scan order matters: rows, then columns, then diagonals.
WIN_LINES: Tuple[WinLine, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)

_CELL_CHARS = {'0': EMPTY, '1': X, '2': O, '.': EMPTY, '-': EMPTY,
               'x': X, 'X': X, 'o': O, 'O': O}


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> Board:
    """Parse a 9-character board string.

    Accepts the digit form (``100020000``) as well as ``.xo`` letters.
    Raises ``ValueError`` on anything else.
    """
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in _CELL_CHARS for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2 or ./x/o.")
    return tuple(_CELL_CHARS[c] for c in raw)


def mark_name(mark: int) -> str:
    return MARK_NAMES[mark]


def opponent_of(mark: int) -> int:
    if mark not in MARKS:
        raise ValueError(f"Not a player mark: {mark!r}")
    return O if mark == X else X


def legal_moves(board: Sequence[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def is_full(board: Sequence[int]) -> bool:
    return EMPTY not in board


def winning_line(board: Sequence[int], mark: int) -> Optional[WinLine]:
    """First line in ``WIN_LINES`` order held entirely by ``mark``."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] == mark and board[b] == mark and board[c] == mark:
            return line
    return None


def get_piece_counts(board: Sequence[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def is_valid_state(board: Sequence[int]) -> bool:
    """True if the board can arise from legal alternating play starting with X."""
    if len(board) != 9 or any(v not in (EMPTY, X, O) for v in board):
        return False
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    x_won = winning_line(board, X) is not None
    o_won = winning_line(board, O) is not None
    if x_won and o_won:
        return False
    if x_won and x_count != o_count + 1:
        return False
    if o_won and x_count != o_count:
        return False
    return True


def side_to_move(board: Sequence[int]) -> int:
    x, o = get_piece_counts(board)
    return X if x == o else O


def pretty(board: Sequence[int]) -> str:
    rows = [" | ".join(mark_name(v) for v in board[i:i + 3]) for i in range(0, 9, 3)]
    return "\n---------\n".join(rows)
