"""
Interactive game session: the turn loop around the core.

The session owns the board and turn counter. It consults the outcome after
every move and asks either the human (via ``read``) or the configured
strategy for the next cell.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .board import MARK_SYMBOLS, CellOccupied, MoveError, apply_move, mark_for_turn, new_board
from .console import Reader, Writer, render_board
from .outcome import Outcome, evaluate_outcome
from .strategies import PlayerConfig, select_move

RESULT_MESSAGES = {
    Outcome.DRAW: "The game ended in a tie.",
    Outcome.X_WINS: "Player 'X' won the game!",
    Outcome.O_WINS: "Player 'O' won the game!",
}


@dataclass
class Session:
    players: PlayerConfig
    board: List[int] = field(default_factory=new_board)
    turn: int = 0
    read: Reader = input
    write: Writer = print
    think_delay: float = 1.0
    rng: Optional[np.random.Generator] = None
    sleep: Callable[[float], None] = time.sleep

    def outcome(self) -> Outcome:
        return evaluate_outcome(self.board)

    def read_human_move(self, mark: int) -> int:
        """Prompt until a legal cell is entered; the move is applied."""
        while True:
            raw = self.read(f"\nPlayer '{MARK_SYMBOLS[mark]}' - Your move: ").strip()
            if not raw.isdecimal():
                self.write("Please type a valid square! (1-9)")
                continue
            index = int(raw) - 1
            try:
                apply_move(self.board, index, mark)
            except CellOccupied:
                self.write("You can only play on empty squares!")
            except MoveError:
                self.write("Please type a valid square! (1-9)")
            else:
                return index

    def play_turn(self) -> int:
        """Play one ply for the side to move and return the chosen cell."""
        mark = mark_for_turn(self.turn)
        strategy = self.players.for_turn(self.turn)
        if strategy is None:
            index = self.read_human_move(mark)
        else:
            self.write("\nThinking...")
            if self.think_delay > 0:
                self.sleep(self.think_delay)
            index = select_move(strategy, self.board, self.turn, rng=self.rng)
            apply_move(self.board, index, mark)
        self.turn += 1
        return index

    def run(self) -> Outcome:
        self.write("\nA new game has started.")
        while True:
            self.write(render_board(self.board))
            outcome = self.outcome()
            if outcome.is_terminal:
                self.write(f"\n{RESULT_MESSAGES[outcome]}\n")
                return outcome
            self.play_turn()
