from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from xotic.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in [str(SRC), env.get("PYTHONPATH", "")] if p)
    exe = [sys.executable, "-m", "xotic.cli"]
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, input=stdin, env=env)


def test_cli_solve_and_tactics(tmp_path: Path):
    r = _run_cli(["solve", "--board", "110220000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "outcome=undecided" in s and "to_move=X" in s and "move=2" in s
    r = _run_cli(["solve", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 0
    assert "outcome=x_wins" in r.stdout + r.stderr
    r = _run_cli(["tactics", "--board", "220100001"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "wins=[]" in s and "blocks=[2]" in s


def test_cli_solve_stdin_streams_csv(tmp_path: Path):
    r = _run_cli(["solve", "--stdin"], cwd=tmp_path, stdin="000000000\nbad\n110220000\n")
    assert r.returncode == 0
    lines = r.stdout.strip().splitlines()
    assert lines[0] == "board,outcome,to_move,move,scores"
    assert lines[1].startswith("000000000,undecided,X,0,")
    assert lines[2].startswith("110220000,undecided,X,2,")
    assert len(lines) == 3


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x"])
def test_cli_error_invalid_boards(bad: str):
    assert main(["solve", "--board", bad]) == 2
    assert main(["tactics", "--board", bad]) == 2


def test_cli_error_unreachable_state():
    assert main(["solve", "--board", "111222111"]) == 2
    assert main(["tactics", "--board", "200000000"]) == 2


def test_cli_rejects_bad_strategy_and_game_count():
    with pytest.raises(SystemExit) as exc:
        main(["match", "--x", "minimax", "--o", "random"])
    assert exc.value.code == 2
    assert main(["match", "--x", "random", "--o", "random", "--games", "0"]) == 2


def test_cli_match_logs_summary(tmp_path: Path):
    r = _run_cli(["--seed", "7", "match", "--x", "optimal", "--o", "random", "--games", "5"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "match x=optimal o=random games=5" in s
    assert "o_wins=0" in s


def test_cli_match_is_reproducible_with_seed(tmp_path: Path):
    runs = []
    for _ in range(2):
        r = _run_cli(["--seed", "3", "match", "--x", "heuristic", "--o", "random", "--games", "8"], cwd=tmp_path)
        assert r.returncode == 0
        runs.append([ln for ln in r.stderr.splitlines() if "match x=" in ln])
    assert runs[0] and runs[0] == runs[1]


def test_cli_play_engines_only(tmp_path: Path):
    r = _run_cli(["play", "--x", "optimal", "--o", "optimal", "--delay", "0"], cwd=tmp_path)
    assert r.returncode == 0
    assert "The game ended in a tie." in r.stdout


def test_cli_play_human_reads_stdin(tmp_path: Path):
    r = _run_cli(["play", "--x", "human", "--o", "human"], cwd=tmp_path, stdin="1\n4\n2\n5\n3\n")
    assert r.returncode == 0
    assert "Player 'X' won the game!" in r.stdout


def test_cli_play_abandoned_on_eof(tmp_path: Path):
    r = _run_cli(["play", "--x", "human", "--o", "random"], cwd=tmp_path, stdin="")
    assert r.returncode == 1
    assert "game abandoned" in r.stderr


def test_cli_help_smoke(tmp_path: Path):
    for args in (["--help"], ["play", "--help"], ["solve", "--help"],
                 ["tactics", "--help"], ["match", "--help"]):
        r = _run_cli(args, cwd=tmp_path)
        assert r.returncode == 0
        assert r.stdout


def test_cli_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
