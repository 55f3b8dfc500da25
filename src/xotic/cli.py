"""Console entry point.

Exit codes: 0 on success, 1 when an interactive game is abandoned because
input closed, 2 for an invalid argument or board.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import random_opponent
from .arena import run_match
from .board import (
    MARK_SYMBOLS,
    BoardFormatError,
    current_player,
    is_valid_state,
    parse_board,
    turn_of,
)
from .console import setup_players
from .outcome import evaluate_outcome
from .paths import env_seed, think_delay
from .search import choose_move, score_moves
from .session import Session
from .strategies import PlayerConfig, Strategy, parse_slot
from .tactics import blocking_moves, fork_moves, immediate_winning_moves


def _slot(text: str) -> str:
    try:
        parse_slot(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return text.strip().lower()


def _strategy(text: str) -> Strategy:
    try:
        return Strategy.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xotic", description="Tic-tac-toe with optimal, heuristic and random engines")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--info", action="store_true", help="Print environment and dependency info and exit")
    p.add_argument("--seed", type=int, default=None, help="Global seed for reproducibility (or XOTIC_SEED)")

    p_play = sub.add_parser("play", help="Play an interactive game in the console")
    p_play.add_argument("--x", type=_slot, default=None, metavar="PLAYER",
                        help="human|optimal|heuristic|random (default: ask via menu)")
    p_play.add_argument("--o", type=_slot, default=None, metavar="PLAYER",
                        help="human|optimal|heuristic|random (default: ask via menu)")
    p_play.add_argument("--delay", type=float, default=None,
                        help="Seconds the computer 'thinks' before moving (default: XOTIC_THINK_DELAY or 1.0)")

    p_sol = sub.add_parser("solve", help="Score every move for the side to move (9 digits, 0=empty,1=X,2=O)")
    p_sol.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sol.add_argument("--stdin", action="store_true", help="Read many boards from stdin and stream CSV output")

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for side-to-move")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 110220000")

    p_match = sub.add_parser("match", help="Play headless games between two engines")
    p_match.add_argument("--x", type=_strategy, required=True, help="optimal|heuristic|random")
    p_match.add_argument("--o", type=_strategy, required=True, help="optimal|heuristic|random")
    p_match.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")
    return p


def _set_global_seed(seed: Optional[int]) -> None:
    if seed is None:
        return
    import random

    import numpy as np

    random.seed(seed)
    np.random.seed(seed)
    random_opponent.seed(seed)


def _print_info() -> None:
    import platform
    import sys

    import numpy as np

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"numpy={np.__version__}")


def _load_board(raw: str) -> List[int]:
    b = parse_board(raw)
    if not is_valid_state(b):
        raise BoardFormatError("Board is not a valid reachable state.")
    return b


def _solve_row(b: List[int]) -> dict:
    outcome = evaluate_outcome(b)
    row = {"outcome": outcome.value, "to_move": MARK_SYMBOLS[current_player(b)], "move": None, "scores": None}
    if not outcome.is_terminal:
        turn = turn_of(b)
        row["scores"] = score_moves(b, turn)
        row["move"] = choose_move(b, turn)
    return row


def _cmd_play(ns) -> int:
    delay = ns.delay if ns.delay is not None else think_delay()
    if ns.x is None and ns.o is None:
        print("\nWelcome to TicTacToe!\n")
        players = setup_players()
    else:
        players = PlayerConfig(parse_slot(ns.x or "human"), parse_slot(ns.o or "human"))
    try:
        Session(players, think_delay=delay).run()
    except (EOFError, KeyboardInterrupt):
        logging.error("Input closed; game abandoned.")
        return 1
    return 0


def _cmd_solve(ns) -> int:
    if ns.stdin:
        import csv as _csv
        import sys as _sys

        w = _csv.writer(_sys.stdout)
        w.writerow(["board", "outcome", "to_move", "move", "scores"])
        for line in _sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                b = _load_board(raw)
            except BoardFormatError as e:
                logging.warning("Skipping %r: %s", raw, e)
                continue
            row = _solve_row(b)
            scores = row["scores"] or []
            w.writerow([
                raw,
                row["outcome"],
                row["to_move"],
                "" if row["move"] is None else row["move"],
                " ".join("-" if s is None else str(s) for s in scores),
            ])
        return 0
    b = _load_board(ns.board or "")
    row = _solve_row(b)
    logging.info("outcome=%s to_move=%s move=%s scores=%s",
                 row["outcome"], row["to_move"], row["move"], row["scores"])
    return 0


def _cmd_tactics(ns) -> int:
    b = _load_board(ns.board)
    p = current_player(b)
    logging.info(
        "to_move=%s wins=%s blocks=%s forks=%s",
        MARK_SYMBOLS[p],
        immediate_winning_moves(b, p),
        blocking_moves(b, p),
        fork_moves(b, p),
    )
    return 0


def _cmd_match(ns, seed: Optional[int]) -> int:
    if ns.games <= 0:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    run_match(ns.x, ns.o, ns.games, seed=seed)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("xotic"))
        except Exception:
            print("unknown")
        return 0
    if ns.info:
        _print_info()
        return 0

    seed = ns.seed if ns.seed is not None else env_seed()
    _set_global_seed(seed)

    try:
        if ns.cmd == "play":
            return _cmd_play(ns)
        if ns.cmd == "solve":
            return _cmd_solve(ns)
        if ns.cmd == "tactics":
            return _cmd_tactics(ns)
        if ns.cmd == "match":
            return _cmd_match(ns, seed)
    except BoardFormatError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
