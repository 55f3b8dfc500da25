"""
Console rendering and the setup menu.

Output goes through a ``write`` callable and input through a ``read``
callable (``print`` and ``input`` by default) so the session can be driven
from tests.
"""
from __future__ import annotations

from typing import Callable, List, Sequence

from .board import MARK_SYMBOLS, O, X
from .strategies import PlayerConfig, Strategy

Reader = Callable[[str], str]
Writer = Callable[[str], None]

ENGINE_MENU = [
    (Strategy.OPTIMAL, "Strong engine (cannot be defeated)"),
    (Strategy.HEURISTIC, "Normal engine (can be defeated)"),
    (Strategy.RANDOM, "Random engine (makes random moves)"),
]


def render_board(board: List[int]) -> str:
    """3x3 box drawing; each cell carries its 1-9 label in the corner."""
    marks = [MARK_SYMBOLS[v] for v in board]
    lines = [
        "  ______________________________",
        " /_____________________________/|",
    ]
    for row in range(3):
        cells = range(row * 3, row * 3 + 3)
        lines.append(" |" + "|".join(f"{i + 1:<9}" for i in cells) + "||")
        lines.append(" |" + "|".join(" " * 9 for _ in cells) + "||")
        lines.append(" |" + "|".join(f"    {marks[i]}    " for i in cells) + "||")
        lines.append(" |" + "|".join(" " * 9 for _ in cells) + "||")
        tail = "|/" if row == 2 else "||"
        lines.append(" |" + "|".join("_" * 9 for _ in cells) + tail)
    return "\n".join(lines)


def ask_choice(read: Reader, write: Writer, title: str, options: Sequence[str]) -> int:
    """Prompt until a number in 1..len(options) is entered; returns it."""
    high = len(options)
    while True:
        write(f"{title} (1-{high})")
        for n, label in enumerate(options, start=1):
            write(f"{n} - {label}")
        raw = read("Your choice: ").strip()
        if raw.isdecimal() and 1 <= int(raw) <= high:
            return int(raw)
        write(f"Invalid choice. Please choose a number between 1 and {high}.")


def setup_players(read: Reader = input, write: Writer = print) -> PlayerConfig:
    mode = ask_choice(read, write, "Please choose a game mode.",
                      ["Player vs. player", "Player vs. computer"])
    if mode == 1:
        return PlayerConfig.human_vs_human()
    engine = ask_choice(read, write, "Please choose an engine to play against.",
                        [label for _, label in ENGINE_MENU])
    strategy = ENGINE_MENU[engine - 1][0]
    side = ask_choice(read, write, "Would you like to play with 'X' or 'O'?",
                      ["X (Goes first)", "O (Goes second)"])
    return PlayerConfig.against(strategy, human_mark=X if side == 1 else O)
