# cards
from .cards import Card, encode, decode, to_int, to_ints, new_deck, set_minus

# collaborators + ranges
from . import combos
from .ranges import HandDist, expand

# weighted sampling
from .lottery import Lottery

__all__ = [
    # cards
    "Card", "encode", "decode", "to_int", "to_ints", "new_deck", "set_minus",

    # combos / ranges
    "combos", "HandDist", "expand",

    # lottery
    "Lottery",
]
