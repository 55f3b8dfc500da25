import math

import pytest

from xotic.arena import ci95, play_game, run_match
from xotic.outcome import Outcome
from xotic.strategies import PlayerConfig, Strategy


def test_optimal_vs_optimal_is_a_fixed_draw():
    rec = play_game(PlayerConfig(Strategy.OPTIMAL, Strategy.OPTIMAL))
    assert rec.outcome is Outcome.DRAW
    assert rec.plies == 9
    assert sorted(rec.moves) == list(range(9))
    assert rec.final_board.count("1") == 5


@pytest.mark.parametrize("x,o", [
    (Strategy.OPTIMAL, Strategy.RANDOM),
    (Strategy.RANDOM, Strategy.OPTIMAL),
    (Strategy.HEURISTIC, Strategy.OPTIMAL),
])
def test_optimal_never_loses(x, o):
    summary, records = run_match(x, o, games=25, seed=11)
    assert summary.games == len(records) == 25
    assert summary.x_wins + summary.o_wins + summary.draws == 25
    if x is Strategy.OPTIMAL:
        assert summary.o_wins == 0
    else:
        assert summary.x_wins == 0


def test_match_is_reproducible_for_a_seed():
    a, ra = run_match(Strategy.RANDOM, Strategy.HEURISTIC, games=10, seed=42)
    b, rb = run_match(Strategy.RANDOM, Strategy.HEURISTIC, games=10, seed=42)
    assert a == b
    assert [r.moves for r in ra] == [r.moves for r in rb]


def test_run_match_rejects_non_positive_games():
    with pytest.raises(ValueError):
        run_match(Strategy.RANDOM, Strategy.RANDOM, games=0)


def test_play_game_needs_two_engines():
    with pytest.raises(ValueError):
        play_game(PlayerConfig(Strategy.RANDOM, None))


def test_ci95():
    m, h = ci95([9.0, 9.0, 9.0])
    assert m == 9.0 and h == 0.0
    m, h = ci95([5.0, 7.0])
    assert m == 6.0
    assert h == pytest.approx(1.96 * 1.0 / math.sqrt(2))
    m, h = ci95([])
    assert math.isnan(m) and math.isnan(h)
