# holdem_equity/helpers/ranges.py
"""
Hand distributions: symbolic starting hand classes and their expansion.

  Token  Combos  Description
  AA          6  Any pair of Aces.
  AKs         4  Ace-King of the same suit.
  AKo        12  Ace-King of different suits.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from holdem_equity.config import RANKS, SUITS
from holdem_equity.errors import RangeTokenError

from .cards import VAL_TO_RANK, to_ints

StrHand = Tuple[str, str]
IntHand = Tuple[int, int]


def _normalize(token: str) -> str:
    tok = token.strip()
    if len(tok) not in (2, 3):
        raise RangeTokenError(f"Bad hand distribution: {token!r}")
    r1, r2, suffix = tok[0].upper(), tok[1].upper(), tok[2:].lower()
    if r1 not in RANKS or r2 not in RANKS:
        raise RangeTokenError(f"Unknown rank in hand distribution: {token!r}")
    if r1 == r2 and suffix:
        raise RangeTokenError(f"A pair can't be suited or offsuit: {token!r}")
    if r1 != r2 and suffix not in ("s", "o"):
        raise RangeTokenError(f"Non-pair needs an 's' or 'o' suffix: {token!r}")
    return r1 + r2 + suffix


@dataclass(frozen=True)
class HandDist:
    dist: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "dist", _normalize(self.dist))

    def __str__(self) -> str:
        return self.dist

    @property
    def is_pair(self) -> bool:
        return len(self.dist) == 2

    @property
    def is_suited(self) -> bool:
        return self.dist[2:] == "s"

    def strs(self) -> List[StrHand]:
        xs = [self.dist[0] + s for s in SUITS]
        ys = [self.dist[1] + s for s in SUITS]
        if self.is_pair:
            return [(xs[i], xs[j]) for i in range(3) for j in range(i + 1, 4)]
        if self.is_suited:
            return [(xs[i], ys[i]) for i in range(4)]
        return [(xs[i], ys[j]) for i in range(4) for j in range(4) if i != j]

    def ints(self) -> List[IntHand]:
        out: List[IntHand] = []
        for h in self.strs():
            a, b = to_ints(h)
            out.append((a, b))
        return out

    @staticmethod
    def from_ranks(r1: int, r2: int, suited: int) -> "HandDist":
        """
        r1, r2 are rank values 2..14. Equal ranks give a pair,
        suited > 0 gives a suited hand, anything else offsuit.
        """
        if r1 not in VAL_TO_RANK or r2 not in VAL_TO_RANK:
            raise RangeTokenError(f"Rank values must be 2..14, got {r1}, {r2}")
        token = VAL_TO_RANK[r1] + VAL_TO_RANK[r2]
        if r1 == r2:
            return HandDist(token)
        return HandDist(token + ("s" if suited > 0 else "o"))


def expand(token: str) -> List[IntHand]:
    return HandDist(token).ints()
