"""
Exhaustive minimax search (the optimal opponent), scored from X's perspective.

Scoring:
- X has won: +(10 - turn); O has won: -(10 - turn).
- Draw: 0.
- Depth weighting prefers faster wins and slower losses. The extra point
  keeps a win on the last ply apart from a draw.

Tie-break policy: the first best-scoring cell in row-major order wins
(strict comparison against the running best).

The caller's board is mutated and restored in place during the walk.
Subtree scores are memoised on (board, turn); ``memo=False`` runs the
plain walk and yields identical values.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

from .board import CELLS, EMPTY, X, GameOverError, legal_moves, mark_for_turn
from .outcome import Outcome, evaluate_outcome

logger = logging.getLogger(__name__)

MAX_SCORE = 99
MIN_SCORE = -99


def terminal_score(outcome: Outcome, turn: int) -> int:
    # decisive results never score 0, even with no plies left
    remaining = CELLS + 1 - turn
    if outcome is Outcome.X_WINS:
        return remaining
    if outcome is Outcome.O_WINS:
        return -remaining
    return 0


def _worst_for(mark: int) -> int:
    return MIN_SCORE if mark == X else MAX_SCORE


def _improves(value: int, best: int, mark: int) -> bool:
    return value > best if mark == X else value < best


@lru_cache(maxsize=None)
def _score_memo(board_t: tuple, turn: int) -> int:
    return score(list(board_t), turn, memo=True)


def _child_score(board: List[int], turn: int, memo: bool) -> int:
    if memo:
        return _score_memo(tuple(board), turn)
    return score(board, turn, memo=False)


def clear_cache() -> None:
    _score_memo.cache_clear()


def score(board: List[int], turn: int, memo: bool = True) -> int:
    outcome = evaluate_outcome(board)
    if outcome.is_terminal:
        return terminal_score(outcome, turn)
    mark = mark_for_turn(turn)
    best = _worst_for(mark)
    for i in legal_moves(board):
        board[i] = mark
        try:
            value = _child_score(board, turn + 1, memo)
        finally:
            board[i] = EMPTY
        if _improves(value, best, mark):
            best = value
    return best


def score_moves(board: List[int], turn: int, memo: bool = True) -> List[Optional[int]]:
    """Score of every cell for the side to move; None for occupied cells."""
    if evaluate_outcome(board).is_terminal:
        raise GameOverError("Cannot search a finished game.")
    mark = mark_for_turn(turn)
    scores: List[Optional[int]] = [None] * CELLS
    for i in legal_moves(board):
        board[i] = mark
        try:
            scores[i] = _child_score(board, turn + 1, memo)
        finally:
            board[i] = EMPTY
    return scores


def choose_move(board: List[int], turn: int, memo: bool = True) -> int:
    """Best cell for the side to move.

    Raises GameOverError if the board is already won or drawn.
    """
    scores = score_moves(board, turn, memo=memo)
    mark = mark_for_turn(turn)
    best_value = _worst_for(mark)
    move = -1
    for i, value in enumerate(scores):
        if value is not None and _improves(value, best_value, mark):
            best_value = value
            move = i
    logger.debug("optimal move=%d score=%d scores=%s", move, best_value, scores)
    return move
