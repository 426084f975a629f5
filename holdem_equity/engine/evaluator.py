from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from holdem_equity.errors import BadInputError
from holdem_equity.helpers.cards import CardLike, check_distinct, to_ints

from .rank_table import RankTable, resolve


def showdown(table: RankTable, board: Sequence[int], hands: Sequence[Sequence[int]]) -> List[float]:
    """Pot share of each hand on a complete board. No validation; this is the hot path."""
    b = table.eval_board(board)
    if len(hands) == 2:
        v0 = table.eval_hand(b, hands[0])
        v1 = table.eval_hand(b, hands[1])
        if v0 > v1:
            return [1.0, 0.0]
        if v0 < v1:
            return [0.0, 1.0]
        return [0.5, 0.5]

    vals = [table.eval_hand(b, h) for h in hands]
    best = max(vals)
    winners = vals.count(best)
    share = 1.0 / winners
    return [share if v == best else 0.0 for v in vals]


def compare_hands(
    board: Iterable[CardLike],
    hands: Sequence[Iterable[CardLike]],
    table: Optional[RankTable] = None,
) -> List[float]:
    """
    Split the pot between hands on a 5 card board. Ties share equally,
    so the result always sums to 1.
    """
    t = resolve(table)
    bd = to_ints(board)
    hs = [to_ints(h) for h in hands]
    if len(bd) != 5:
        raise BadInputError(f"Board must be 5 cards to compare hands, got {len(bd)}")
    if len(hs) < 2:
        raise BadInputError("Need at least two hands to compare")
    if any(len(h) != 2 for h in hs):
        raise BadInputError("Every hand must be exactly 2 cards")
    check_distinct(bd + [c for h in hs for c in h])
    return showdown(t, bd, hs)


def evaluate_hand(cards: Iterable[CardLike], table: Optional[RankTable] = None) -> int:
    t = resolve(table)
    cs = to_ints(cards)
    check_distinct(cs)
    return t.evaluate(cs)


def winners(board: Iterable[CardLike], hands: Sequence[Iterable[CardLike]], table: Optional[RankTable] = None) -> List[int]:
    shares = compare_hands(board, hands, table=table)
    best = max(shares)
    return [i for i, s in enumerate(shares) if s == best]
