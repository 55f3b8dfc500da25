"""xotic package.

Tic-tac-toe core: board model, outcome evaluation, and three computer
strategies (exhaustive minimax, one-ply heuristic, random) behind a single
``select_move`` dispatch. A console session, headless match runner and CLI
sit on top.
"""

from .board import CellOccupied, GameOverError, MoveError, OutOfRange, apply_move
from .outcome import Outcome, evaluate_outcome
from .strategies import PlayerConfig, Strategy, select_move

__all__ = [
    "apply_move",
    "evaluate_outcome",
    "select_move",
    "Outcome",
    "Strategy",
    "PlayerConfig",
    "MoveError",
    "OutOfRange",
    "CellOccupied",
    "GameOverError",
]
