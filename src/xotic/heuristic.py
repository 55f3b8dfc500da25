"""
Heuristic opponent: one-ply lookahead.

1. Take the first cell (row-major) that wins immediately.
2. Otherwise take the first cell where the opponent would win (block).
3. Otherwise play a random empty cell.

It does not look two moves ahead, so a fork beats it.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from . import random_opponent
from .board import legal_moves, mark_for_turn, opponent
from .tactics import wins_with

logger = logging.getLogger(__name__)


def choose_move(board: List[int], turn: int, rng: Optional[np.random.Generator] = None) -> int:
    mark = mark_for_turn(turn)
    moves = legal_moves(board)
    for i in moves:
        if wins_with(board, i, mark):
            logger.debug("heuristic win at %d", i)
            return i
    other = opponent(mark)
    for i in moves:
        if wins_with(board, i, other):
            logger.debug("heuristic block at %d", i)
            return i
    return random_opponent.choose_move(board, turn, rng=rng)
