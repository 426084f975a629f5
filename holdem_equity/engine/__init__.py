from .rank_table import (
    RankTable,
    HAND_CATEGORIES,
    split_rank,
    category_name,
    load_rank_table,
    init_rank_table,
    get_rank_table,
)
from .evaluator import compare_hands, evaluate_hand, winners
from .equity import simulate, simulate_parallel, split_trials
from .probability import p_hole, cond_probs

__all__ = [
    "RankTable",
    "HAND_CATEGORIES",
    "split_rank",
    "category_name",
    "load_rank_table",
    "init_rank_table",
    "get_rank_table",
    "compare_hands",
    "evaluate_hand",
    "winners",
    "simulate",
    "simulate_parallel",
    "split_trials",
    "p_hole",
    "cond_probs",
]
