from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional, Tuple

from holdem_equity import config
from holdem_equity.errors import BadInputError
from holdem_equity.helpers import combos
from holdem_equity.helpers.cards import CardLike, check_distinct, new_deck, set_minus, to_ints

from .evaluator import showdown
from .rank_table import RankTable, resolve

logger = logging.getLogger(__name__)


def _known_cards(hole: Iterable[CardLike], board: Iterable[CardLike]) -> Tuple[List[int], List[int]]:
    h = to_ints(hole)
    b = to_ints(board)
    if len(h) != 2:
        raise BadInputError(f"Hole must be 2 cards, got {len(h)}")
    if len(b) > 5:
        raise BadInputError(f"Board cannot exceed 5 cards, got {len(b)}")
    check_distinct(h + b)
    return h, b


def _exhaustive(table: RankTable, hole: List[int], board: List[int], deck: List[int]) -> float:
    b_len = len(board)
    full_board = board + [0] * (5 - b_len)
    hands = [hole, [0, 0]]
    total = 0.0
    count = 0
    for opp in combos.generator(deck, 2):
        hands[1] = opp
        rest = set_minus(deck, opp)
        for runout in combos.generator(rest, 5 - b_len):
            full_board[b_len:] = runout
            total += showdown(table, full_board, hands)[0]
            count += 1
    logger.debug("Exhaustive equity over %d showdowns", count)
    return total / count


def _monte_carlo(
    table: RankTable,
    hole: List[int],
    board: List[int],
    deck: List[int],
    trials: int,
    rng: random.Random,
) -> float:
    b_len = len(board)
    full_board = board + [0] * (5 - b_len)
    hands = [hole, [0, 0]]
    total = 0.0
    for _ in range(trials):
        rng.shuffle(deck)
        hands[1] = deck[:2]
        full_board[b_len:] = deck[2:7 - b_len]
        total += showdown(table, full_board, hands)[0]
    return total / trials


def simulate(
    hole: Iterable[CardLike],
    board: Iterable[CardLike] = (),
    trials: int = 0,
    rng: Optional[random.Random] = None,
    table: Optional[RankTable] = None,
) -> float:
    """
    Equity of hole against one random opponent hand.

    trials == 0 enumerates every opponent hand and every board completion
    (exact). trials > 0 runs that many Monte-Carlo deals.
    """
    t = resolve(table)
    h, b = _known_cards(hole, board)
    if trials < 0:
        raise BadInputError(f"trials must be >= 0, got {trials}")

    deck = new_deck(h + b)
    if trials == 0:
        return _exhaustive(t, h, b, deck)

    logger.debug("Monte-Carlo equity: %d trials, %d board cards known", trials, len(b))
    return _monte_carlo(t, h, b, deck, trials, rng or random.Random())


# ------------------------------------------------------------
# Worker processes: each holds the read-only table set by the
# pool initializer and its own deck and rng
# ------------------------------------------------------------

_WORKER_TABLE: Optional[RankTable] = None


def _init_worker(table: RankTable) -> None:
    global _WORKER_TABLE
    _WORKER_TABLE = table


def _run_worker(hole: List[int], board: List[int], trials: int, seed: int) -> float:
    table = resolve(_WORKER_TABLE)
    return _monte_carlo(table, hole, board, new_deck(hole + board), trials, random.Random(seed))


def split_trials(trials: int, workers: int) -> int:
    """Per-worker share of trials, rounded up so every worker runs the same count."""
    return -(-trials // workers)


def simulate_parallel(
    hole: Iterable[CardLike],
    board: Iterable[CardLike] = (),
    trials: int = 10_000,
    workers: Optional[int] = None,
    seed: Optional[int] = None,
    table: Optional[RankTable] = None,
) -> float:
    """
    Monte-Carlo equity fanned out over a pool of workers.

    Each worker gets an equal share of trials (the total is rounded up to a
    multiple of workers) with its own deck and rng, so the plain mean of
    the worker results is the overall mean.
    """
    t = resolve(table)
    h, b = _known_cards(hole, board)
    n = workers if workers is not None else config.DEFAULT_WORKERS
    if n < 1:
        raise BadInputError(f"workers must be >= 1, got {n}")
    if trials < 1:
        raise BadInputError(f"Parallel equity needs a positive trial count, got {trials}")

    per_worker = split_trials(trials, n)
    if per_worker * n != trials:
        logger.debug("Rounded %d trials up to %d for %d workers", trials, per_worker * n, n)

    seeder = random.Random(seed)
    seeds = [seeder.getrandbits(64) for _ in range(n)]
    with ProcessPoolExecutor(max_workers=n, initializer=_init_worker, initargs=(t,)) as ex:
        futures = [ex.submit(_run_worker, h, b, per_worker, s) for s in seeds]
        results = [f.result() for f in futures]
    return sum(results) / n
