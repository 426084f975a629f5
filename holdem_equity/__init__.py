# errors
from .errors import (
    EquityError,
    BadInputError,
    RangeTokenError,
    TableNotLoadedError,
    MalformedTableError,
)

# cards, ranges, lottery
from .helpers import Card, encode, decode, to_ints, new_deck, set_minus, HandDist, expand, Lottery

# ranking table + equity
from .engine import (
    RankTable,
    split_rank,
    load_rank_table,
    init_rank_table,
    get_rank_table,
    compare_hands,
    evaluate_hand,
    simulate,
    simulate_parallel,
    p_hole,
    cond_probs,
)

__all__ = [
    # errors
    "EquityError", "BadInputError", "RangeTokenError", "TableNotLoadedError", "MalformedTableError",

    # cards / ranges / lottery
    "Card", "encode", "decode", "to_ints", "new_deck", "set_minus", "HandDist", "expand", "Lottery",

    # engine
    "RankTable", "split_rank", "load_rank_table", "init_rank_table", "get_rank_table",
    "compare_hands", "evaluate_hand", "simulate", "simulate_parallel", "p_hole", "cond_probs",
]
