# scripts/equity_calc.py
from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from holdem_equity import config
from holdem_equity.engine import (
    category_name,
    evaluate_hand,
    init_rank_table,
    p_hole,
    simulate,
    simulate_parallel,
    split_rank,
)
from holdem_equity.errors import EquityError


def _cmd_equity(args: argparse.Namespace) -> None:
    init_rank_table(args.table)
    if args.workers and args.trials > 0:
        eq = simulate_parallel(args.hole, args.board, trials=args.trials, workers=args.workers, seed=args.seed)
    else:
        eq = simulate(args.hole, args.board, trials=args.trials, rng=random.Random(args.seed))
    print(f"equity {eq:.4f}")


def _cmd_prob(args: argparse.Namespace) -> None:
    print(f"P({args.dist}) {p_hole(args.visible.split(), args.dist):.6f}")


def _cmd_rank(args: argparse.Namespace) -> None:
    init_rank_table(args.table)
    rank = evaluate_hand(args.cards)
    cat, intra = split_rank(rank)
    print(f"rank {rank} ({category_name(rank)}, category {cat}, intra {intra})")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Hold'em equity and hole card probabilities")
    ap.add_argument("--table", type=str, default=None, help=f"hand ranks file (default {config.HAND_RANKS_PATH})")
    ap.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL, choices=config.LOG_LEVELS)
    sub = ap.add_subparsers(dest="cmd", required=True)

    eq = sub.add_parser("equity", help="equity of a hand against one random opponent")
    eq.add_argument("hole", type=str, help='e.g. "Ah Ad"')
    eq.add_argument("--board", type=str, default="")
    eq.add_argument("--trials", type=int, default=0, help="0 = exhaustive enumeration")
    eq.add_argument("--workers", type=int, default=0, help="parallel Monte-Carlo workers")
    eq.add_argument("--seed", type=int, default=None)
    eq.set_defaults(func=_cmd_equity)

    pr = sub.add_parser("prob", help="probability of a hole card class")
    pr.add_argument("dist", type=str, help="AA, AKs, AKo ...")
    pr.add_argument("--visible", type=str, default="")
    pr.set_defaults(func=_cmd_prob)

    rk = sub.add_parser("rank", help="rank a 5 to 7 card hand")
    rk.add_argument("cards", type=str)
    rk.set_defaults(func=_cmd_rank)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except EquityError as e:
        print(f"error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
