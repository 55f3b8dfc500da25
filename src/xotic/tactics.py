"""
Tactics and simple motifs: immediate wins, blocks and forks.

All helpers scan empty cells in row-major order and never modify the board
they are given.
"""
from typing import List

from .board import legal_moves, opponent
from .outcome import Outcome, evaluate_outcome


def wins_with(board: List[int], index: int, mark: int) -> bool:
    b = board[:]
    b[index] = mark
    return evaluate_outcome(b) is Outcome.win_for(mark)


def immediate_winning_moves(board: List[int], mark: int) -> List[int]:
    return [i for i in legal_moves(board) if wins_with(board, i, mark)]


def blocking_moves(board: List[int], mark: int) -> List[int]:
    """Cells where the opponent of ``mark`` would complete a line."""
    return immediate_winning_moves(board, opponent(mark))


def fork_moves(board: List[int], mark: int) -> List[int]:
    forks: List[int] = []
    for i in legal_moves(board):
        b = board[:]
        b[i] = mark
        if len(immediate_winning_moves(b, mark)) >= 2:
            forks.append(i)
    return forks

