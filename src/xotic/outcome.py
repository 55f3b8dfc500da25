"""
Outcome evaluation: winner, draw and undecided detection.

Lines are scanned in a fixed order (rows top-to-bottom, columns
left-to-right, main diagonal, anti-diagonal) and the first complete line
decides the winner.
"""
from __future__ import annotations

import enum
from typing import List, Optional

from .board import EMPTY, O, WIN_PATTERNS, X


class Outcome(enum.Enum):
    UNDECIDED = "undecided"
    DRAW = "draw"
    X_WINS = "x_wins"
    O_WINS = "o_wins"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.UNDECIDED

    @property
    def winner(self) -> int:
        if self is Outcome.X_WINS:
            return X
        if self is Outcome.O_WINS:
            return O
        return EMPTY

    @classmethod
    def win_for(cls, mark: int) -> "Outcome":
        return cls.X_WINS if mark == X else cls.O_WINS


def winning_line(board: List[int]) -> Optional[List[int]]:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return pattern
    return None


def get_winner(board: List[int]) -> int:
    line = winning_line(board)
    return EMPTY if line is None else board[line[0]]


def is_draw(board: List[int]) -> bool:
    return EMPTY not in board and get_winner(board) == EMPTY


def evaluate_outcome(board: List[int]) -> Outcome:
    w = get_winner(board)
    if w != EMPTY:
        return Outcome.win_for(w)
    if EMPTY not in board:
        return Outcome.DRAW
    return Outcome.UNDECIDED
