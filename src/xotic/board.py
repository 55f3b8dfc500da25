"""
Board model: representation, serialization, move application, validity.

- A board is a list of 9 cells in row-major order: 0=empty, 1=X, 2=O.
- X always moves first, so a legal board has equal counts (X to move) or
  one more X than O (O to move).
- A "ply" is a half-move; ``turn`` counts plies already played.
"""
from __future__ import annotations

from typing import List, Tuple

EMPTY = 0
X = 1
O = 2

SIDE = 3
CELLS = SIDE * SIDE

MARK_SYMBOLS = {EMPTY: " ", X: "X", O: "O"}

# rows top-to-bottom, columns left-to-right, main diagonal, anti-diagonal
WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
]


class MoveError(ValueError):
    """Move rejected; the board was not modified."""

    def __init__(self, index, message: str):
        super().__init__(message)
        self.index = index


class OutOfRange(MoveError):
    def __init__(self, index):
        super().__init__(index, f"Cell {index!r} is outside the board (0-{CELLS - 1}).")


class CellOccupied(MoveError):
    def __init__(self, index: int):
        super().__init__(index, f"Cell {index} is already occupied.")


class BoardFormatError(ValueError):
    pass


class GameOverError(ValueError):
    """Move selection was requested on a finished game."""


def new_board() -> List[int]:
    return [EMPTY] * CELLS


def apply_move(board: List[int], index: int, mark: int) -> None:
    """Place ``mark`` on ``board[index]`` in place.

    Raises OutOfRange or CellOccupied without touching the board.
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELLS:
        raise OutOfRange(index)
    if board[index] != EMPTY:
        raise CellOccupied(index)
    board[index] = mark


def legal_moves(board: List[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def mark_for_turn(turn: int) -> int:
    return X if turn % 2 == 0 else O


def opponent(mark: int) -> int:
    return O if mark == X else X


def get_piece_counts(board: List[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def turn_of(board: List[int]) -> int:
    """Number of plies already played on ``board``."""
    x, o = get_piece_counts(board)
    return x + o


def current_player(board: List[int]) -> int:
    x, o = get_piece_counts(board)
    return X if x == o else O


def serialize_board(board: List[int]) -> str:
    return ''.join(str(cell) for cell in board)


def parse_board(board_str: str) -> List[int]:
    raw = (board_str or "").strip()
    if len(raw) != CELLS or any(c not in "012" for c in raw):
        raise BoardFormatError(f"Invalid board string {raw!r}. Must be {CELLS} chars of 0/1/2.")
    return [int(c) for c in raw]


def is_valid_state(board: List[int]) -> bool:
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: int) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))
    x_wins, o_wins = count_wins(X), count_wins(O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True
