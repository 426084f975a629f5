import random
from itertools import combinations

import pytest

from holdem_equity.engine.equity import simulate, simulate_parallel, split_trials
from holdem_equity.errors import BadInputError
from holdem_equity.helpers.cards import new_deck, to_ints


def _identity_oracle(hole, board):
    # with the identity table only the hole card ids matter: rank = 53 + board + hole
    h = to_ints(hole)
    deck = new_deck(h + to_ints(board))
    hs = sum(h)
    total = 0.0
    n = 0
    for a, b in combinations(deck, 2):
        total += 1.0 if hs > a + b else (0.5 if hs == a + b else 0.0)
        n += 1
    return total / n


def test_exhaustive_river_matches_oracle(identity_table):
    hole, board = ["Th", "9d"], ["2c", "5d", "8h", "Js", "Kc"]
    eq = simulate(hole, board, trials=0, table=identity_table)
    assert eq == pytest.approx(_identity_oracle(hole, board))


def test_exhaustive_turn_matches_oracle(identity_table):
    hole, board = ["Qh", "4d"], ["2c", "5d", "8h", "Js"]
    eq = simulate(hole, board, trials=0, table=identity_table)
    assert eq == pytest.approx(_identity_oracle(hole, board))


def test_exhaustive_is_deterministic(identity_table):
    args = (["Qh", "4d"], ["2c", "5d", "8h", "Js"])
    assert simulate(*args, table=identity_table) == simulate(*args, table=identity_table)


def test_monte_carlo_converges(identity_table):
    hole, board = ["Th", "9d"], ["2c", "5d", "8h", "Js", "Kc"]
    exact = simulate(hole, board, trials=0, table=identity_table)
    mc = simulate(hole, board, trials=20_000, rng=random.Random(11), table=identity_table)
    assert mc == pytest.approx(exact, abs=0.02)


def test_monte_carlo_with_partial_board(identity_table):
    hole, board = ["Qh", "4d"], ["2c", "5d", "8h"]
    mc = simulate(hole, board, trials=10_000, rng=random.Random(5), table=identity_table)
    assert mc == pytest.approx(_identity_oracle(hole, board), abs=0.03)


def test_parallel_matches_serial(identity_table):
    hole, board = ["Th", "9d"], ["2c", "5d", "8h", "Js", "Kc"]
    exact = simulate(hole, board, trials=0, table=identity_table)
    par = simulate_parallel(hole, board, trials=20_000, workers=4, seed=3, table=identity_table)
    assert par == pytest.approx(exact, abs=0.02)
    one = simulate_parallel(hole, board, trials=20_000, workers=1, seed=3, table=identity_table)
    assert one == pytest.approx(exact, abs=0.02)


def test_parallel_is_reproducible_with_seed(identity_table):
    args = (["Th", "9d"], ["2c", "5d", "8h", "Js", "Kc"])
    a = simulate_parallel(*args, trials=2_000, workers=3, seed=9, table=identity_table)
    b = simulate_parallel(*args, trials=2_000, workers=3, seed=9, table=identity_table)
    assert a == b


def test_split_trials_rounds_up():
    assert split_trials(10, 4) == 3
    assert split_trials(12, 4) == 3
    assert split_trials(1, 8) == 1


def test_bad_inputs(identity_table):
    with pytest.raises(BadInputError):
        simulate(["Ah"], [], table=identity_table)
    with pytest.raises(BadInputError):
        simulate(["Ah", "Ad"], ["Ah"], table=identity_table)
    with pytest.raises(BadInputError):
        simulate(["Ah", "Ad"], ["2c", "3c", "4c", "5c", "6c", "7c"], table=identity_table)
    with pytest.raises(BadInputError):
        simulate(["Ah", "Ad"], [], trials=-1, table=identity_table)
    with pytest.raises(BadInputError):
        simulate_parallel(["Ah", "Ad"], [], trials=0, workers=2, table=identity_table)
    with pytest.raises(BadInputError):
        simulate_parallel(["Ah", "Ad"], [], trials=100, workers=0, table=identity_table)


def test_real_table_turn_convergence(hand_ranks):
    hole, board = ["Ah", "Ad"], ["Kc", "7d", "2s", "9h"]
    exact = simulate(hole, board, trials=0, table=hand_ranks)
    mc = simulate_parallel(hole, board, trials=40_000, workers=4, seed=1, table=hand_ranks)
    assert 0.8 < exact < 1.0
    assert mc == pytest.approx(exact, abs=0.01)


def test_monte_carlo_empty_board(identity_table):
    mc = simulate(["Ah", "Ad"], [], trials=20_000, rng=random.Random(1), table=identity_table)
    assert mc == pytest.approx(_identity_oracle(["Ah", "Ad"], []), abs=0.02)


def test_parallel_empty_board(identity_table):
    par = simulate_parallel(["Ah", "Ad"], [], trials=20_000, workers=2, seed=4, table=identity_table)
    assert par == pytest.approx(_identity_oracle(["Ah", "Ad"], []), abs=0.02)


def test_exhaustive_flop_matches_oracle(identity_table):
    hole, board = ["7h", "6d"], ["2c", "Jd", "Ks"]
    eq = simulate(hole, board, trials=0, table=identity_table)
    assert eq == pytest.approx(_identity_oracle(hole, board))


def test_parallel_worker_replays_serial_deal(identity_table):
    # one worker seeded from seed=8 deals exactly what the serial path deals with that rng
    hole, board = ["Th", "9d"], ["2c", "5d", "8h"]
    worker_seed = random.Random(8).getrandbits(64)
    serial = simulate(hole, board, trials=500, rng=random.Random(worker_seed), table=identity_table)
    par = simulate_parallel(hole, board, trials=500, workers=1, seed=8, table=identity_table)
    assert par == serial
