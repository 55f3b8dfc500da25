"""
Strategy tags, per-slot player configuration and move dispatch.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from . import heuristic, random_opponent, search
from .board import X, mark_for_turn


class Strategy(enum.Enum):
    OPTIMAL = "optimal"
    HEURISTIC = "heuristic"
    RANDOM = "random"

    @classmethod
    def parse(cls, text: str) -> "Strategy":
        """Accept names, menu numbers (1-3) and the strong/normal aliases."""
        key = (text or "").strip().lower()
        aliases = {
            "1": cls.OPTIMAL, "strong": cls.OPTIMAL,
            "2": cls.HEURISTIC, "normal": cls.HEURISTIC,
            "3": cls.RANDOM,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown strategy: {text!r}") from None


def parse_slot(text: str) -> Optional[Strategy]:
    """``human`` maps to None, anything else to a Strategy."""
    if (text or "").strip().lower() == "human":
        return None
    return Strategy.parse(text)


@dataclass(frozen=True)
class PlayerConfig:
    x: Optional[Strategy] = None
    o: Optional[Strategy] = None

    @classmethod
    def human_vs_human(cls) -> "PlayerConfig":
        return cls(None, None)

    @classmethod
    def against(cls, strategy: Strategy, human_mark: int = X) -> "PlayerConfig":
        if human_mark == X:
            return cls(None, strategy)
        return cls(strategy, None)

    def for_mark(self, mark: int) -> Optional[Strategy]:
        return self.x if mark == X else self.o

    def for_turn(self, turn: int) -> Optional[Strategy]:
        return self.for_mark(mark_for_turn(turn))


def select_move(
    strategy: Strategy,
    board: List[int],
    turn: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    if strategy is Strategy.OPTIMAL:
        return search.choose_move(board, turn)
    if strategy is Strategy.HEURISTIC:
        return heuristic.choose_move(board, turn, rng=rng)
    if strategy is Strategy.RANDOM:
        return random_opponent.choose_move(board, turn, rng=rng)
    raise ValueError(f"Unknown strategy: {strategy!r}")
