# holdem_equity/engine/probability.py
"""
Hole card class probabilities.

P(hole) is the number of hands in a class divided by the number of
two card hands still possible once the seen cards are removed:

              Me   Opp  Board  P(AA)
  Pre-deal    ??   ??   ???    C(4,2) / C(52,2) ~= 0.0045
  Pre-flop    AKs  ??   ???    C(3,2) / C(50,2) ~= 0.0024

Given P(action | hole) for a set of classes, Bayes' rule gives

                     P(hole) * P(action | hole)
  P(hole | action) = --------------------------
                             P(action)

where P(action) sums the numerator over the classes supplied.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Union

from holdem_equity.errors import BadInputError
from holdem_equity.helpers import combos
from holdem_equity.helpers.cards import CardLike, check_distinct, new_deck, to_ints
from holdem_equity.helpers.ranges import HandDist

logger = logging.getLogger(__name__)


def p_hole(visible: Iterable[CardLike], dist: Union[HandDist, str]) -> float:
    hd = dist if isinstance(dist, HandDist) else HandDist(dist)
    seen = to_ints(visible)
    check_distinct(seen)
    deck = new_deck(seen)

    all_hands = combos.count(len(deck), 2)
    if all_hands < 1:
        raise BadInputError(f"Need at least 2 unseen cards, only {len(deck)} left")

    live = set(deck)
    matches = sum(1 for a, b in hd.ints() if a in live and b in live)
    return matches / all_hands


def cond_probs(visible: Iterable[CardLike], likelihoods: Mapping[str, float]) -> Dict[str, float]:
    """Posterior P(hole | action) for each class token in likelihoods (P(action | hole))."""
    seen = to_ints(visible)
    joint = {tok: p_hole(seen, tok) * p for tok, p in likelihoods.items()}
    evidence = sum(joint.values())
    if evidence <= 0:
        raise BadInputError("Action has zero probability under every hole card class")
    logger.debug("P(action) = %.6f over %d classes", evidence, len(joint))
    return {tok: v / evidence for tok, v in joint.items()}
