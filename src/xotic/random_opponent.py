"""
Random opponent: uniform choice among the empty cells.

Draws come from a process-wide numpy Generator created at import time.
``seed`` replaces it; callers may also pass their own generator.
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .board import GameOverError, legal_moves

_rng = np.random.default_rng()


def seed(value: Optional[int]) -> None:
    global _rng
    _rng = np.random.default_rng(value)


def choose_move(board: List[int], turn: int, rng: Optional[np.random.Generator] = None) -> int:
    moves = legal_moves(board)
    if not moves:
        raise GameOverError("No empty cells left.")
    gen = rng if rng is not None else _rng
    return moves[int(gen.integers(len(moves)))]
