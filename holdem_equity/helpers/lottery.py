from __future__ import annotations

import random
from typing import List, Mapping, Optional, Tuple

from holdem_equity.errors import BadInputError


class Lottery:
    """
    Weighted draw over a discrete distribution {prize: probability}.

    Probabilities are accumulated in iteration order and not normalised;
    they should add up to 1. If they don't, the last bucket is effectively
    rounded up to 1.0.
    """

    def __init__(self, dist: Mapping[str, float]):
        probs: List[float] = []
        prizes: List[str] = []
        total = 0.0
        for prize, p in dist.items():
            if p != 0:
                total += p
                probs.append(total)
                prizes.append(prize)
        self.probs: Tuple[float, ...] = tuple(probs)
        self.prizes: Tuple[str, ...] = tuple(prizes)

    def __len__(self) -> int:
        return len(self.prizes)

    def __str__(self) -> str:
        body = "".join(f"{prize}:{p:.2f} " for prize, p in zip(self.prizes, self.probs))
        return f"[ {body}]"

    def draw(self, rng: Optional[random.Random] = None) -> str:
        if not self.prizes:
            raise BadInputError("Cannot draw from an empty lottery")
        draw = (rng or random).random()
        for p, prize in zip(self.probs, self.prizes):
            if p > draw:
                return prize
        return self.prizes[-1]
