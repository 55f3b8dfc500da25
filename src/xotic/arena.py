"""
Headless matches between two computer strategies.

Each game starts from the empty board and runs the same turn loop as the
interactive session, minus rendering and pauses.
"""
from __future__ import annotations

import logging
import math
import statistics as stats
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .board import apply_move, mark_for_turn, new_board, serialize_board
from .outcome import Outcome, evaluate_outcome
from .strategies import PlayerConfig, Strategy, select_move

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    x: Strategy
    o: Strategy
    moves: List[int] = field(default_factory=list)
    outcome: Outcome = Outcome.UNDECIDED
    final_board: str = ""

    @property
    def plies(self) -> int:
        return len(self.moves)


@dataclass
class MatchSummary:
    x: Strategy
    o: Strategy
    games: int
    x_wins: int
    o_wins: int
    draws: int
    mean_plies: float
    plies_ci95: float


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    half = 1.96 * (s / math.sqrt(len(values)))
    return m, half


def play_game(players: PlayerConfig, rng: Optional[np.random.Generator] = None) -> GameRecord:
    if players.x is None or players.o is None:
        raise ValueError("Headless games need a strategy on both sides.")
    board = new_board()
    record = GameRecord(players.x, players.o)
    turn = 0
    outcome = evaluate_outcome(board)
    while not outcome.is_terminal:
        index = select_move(players.for_turn(turn), board, turn, rng=rng)
        apply_move(board, index, mark_for_turn(turn))
        record.moves.append(index)
        turn += 1
        outcome = evaluate_outcome(board)
    record.outcome = outcome
    record.final_board = serialize_board(board)
    return record


def run_match(
    x: Strategy,
    o: Strategy,
    games: int,
    seed: Optional[int] = None,
) -> Tuple[MatchSummary, List[GameRecord]]:
    if games <= 0:
        raise ValueError(f"games must be positive, got {games}")
    rng = np.random.default_rng(seed)
    players = PlayerConfig(x, o)
    records: List[GameRecord] = []
    for n in range(games):
        rec = play_game(players, rng=rng)
        logger.debug("game=%d moves=%s outcome=%s", n, rec.moves, rec.outcome.value)
        records.append(rec)
    mean, half = ci95([float(r.plies) for r in records])
    summary = MatchSummary(
        x=x,
        o=o,
        games=games,
        x_wins=sum(1 for r in records if r.outcome is Outcome.X_WINS),
        o_wins=sum(1 for r in records if r.outcome is Outcome.O_WINS),
        draws=sum(1 for r in records if r.outcome is Outcome.DRAW),
        mean_plies=mean,
        plies_ci95=half,
    )
    logger.info(
        "match x=%s o=%s games=%d x_wins=%d o_wins=%d draws=%d plies=%.2f±%.2f",
        x.value, o.value, games, summary.x_wins, summary.o_wins, summary.draws,
        mean, half,
    )
    return summary, records
