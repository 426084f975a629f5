from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

from holdem_equity.config import RANKS, SUITS
from holdem_equity.errors import BadInputError

RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}

# ------------------------------------------------------------
# Card encoding: 1..52 (rank-major, suit-minor)
# rank 2..A => 0..12, suit c/d/h/s => 0..3
# card = rank_index * 4 + suit_index + 1
# ------------------------------------------------------------


def encode(rank: int, suit: int) -> int:
    """rank_index 0..12, suit_index 0..3 -> card int 1..52"""
    return rank * 4 + suit + 1


@dataclass(frozen=True, order=True)
class Card:
    val: int
    suit: str

    def __str__(self) -> str:
        return f"{VAL_TO_RANK[self.val]}{self.suit}"

    @property
    def id(self) -> int:
        return encode(self.val - 2, SUITS.index(self.suit))

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if len(s) != 2:
            raise BadInputError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), s[1].lower()
        if r not in RANK_TO_VAL or su not in SUITS:
            raise BadInputError(f"Bad card string: {s!r}")
        return Card(RANK_TO_VAL[r], su)


def decode(cid: int) -> Card:
    if not (1 <= cid <= 52):
        raise BadInputError(f"Card id out of range: {cid}")
    r_i, s_i = divmod(cid - 1, 4)
    return Card(r_i + 2, SUITS[s_i])


CardLike = Union[str, Card, int]


def to_int(c: CardLike) -> int:
    if isinstance(c, Card):
        return c.id
    if isinstance(c, str):
        return Card.from_str(c).id
    if isinstance(c, bool) or not isinstance(c, int):
        raise BadInputError(f"Not a card: {c!r}")
    if not (1 <= c <= 52):
        raise BadInputError(f"Card id out of range: {c!r}")
    return c


def to_ints(cards: Iterable[CardLike]) -> List[int]:
    """Accepts 'Ah' strings, Card objects or ints; a single space separated string works too."""
    if isinstance(cards, str):
        cards = cards.split()
    return [to_int(c) for c in cards]


def set_minus(a: Sequence[int], b: Sequence[int]) -> List[int]:
    # |a|, |b| <= 52 so the quadratic scan is fine
    return [v for v in a if v not in b]


def new_deck(excluded: Sequence[int] = ()) -> List[int]:
    deck = list(range(1, 53))
    if excluded:
        deck = set_minus(deck, excluded)
    return deck


def check_distinct(cards: Sequence[int]) -> None:
    if len(set(cards)) != len(cards):
        dupes = sorted({str(decode(c)) for c in cards if cards.count(c) > 1})
        raise BadInputError(f"Duplicate cards detected: {' '.join(dupes)}")
