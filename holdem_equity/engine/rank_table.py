# holdem_equity/engine/rank_table.py
"""
Perfect-hash hand ranking table (the Two Plus Two "HandRanks.dat" layout).

The table is a flat array of uint32 transitions. Evaluation starts at
BASE_OFFSET and folds one card at a time:

    cursor = T[cursor + card]

After seven cards the cursor *is* the rank. After five or six cards the
table needs one more "no more cards" transition, T[cursor], to reach the
rank. A five card board can be folded once and reused as the starting
state for any number of two card hole hands.

Ranks are ordered (higher wins) and split into category / intra-category:

    category = rank >> 12, intra = rank & 0xFFF
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from holdem_equity import config
from holdem_equity.errors import BadInputError, MalformedTableError, TableNotLoadedError

logger = logging.getLogger(__name__)

HAND_CATEGORIES: Dict[int, str] = {
    1: "high_card",
    2: "pair",
    3: "two_pair",
    4: "trips",
    5: "straight",
    6: "flush",
    7: "full_house",
    8: "quads",
    9: "straight_flush",
}


def split_rank(rank: int) -> Tuple[int, int]:
    return rank >> 12, rank & 0xFFF


def category_name(rank: int) -> str:
    return HAND_CATEGORIES.get(rank >> 12, "invalid")


class RankTable:
    """Read-only view over the transition array. Safe to share across threads; pickles by path for worker processes."""

    def __init__(self, values: np.ndarray, path: Optional[str] = None):
        arr = np.ascontiguousarray(values, dtype=np.uint32)
        if arr.ndim != 1 or arr.size <= config.BASE_OFFSET + 52:
            raise MalformedTableError(f"Rank table must be a flat array, got shape {arr.shape}")
        if arr is values:
            arr = arr.view()  # don't flip the caller's write flag
        arr.setflags(write=False)
        self.values = arr
        # memoryview indexing hands back plain ints without boxing numpy scalars
        self._t = memoryview(arr)
        self.path = path

    def __len__(self) -> int:
        return len(self.values)

    def __reduce__(self):
        # worker processes re-map the file instead of receiving a pickled copy
        if self.path is not None:
            return _map_rank_table, (self.path,)
        return RankTable, (np.asarray(self.values),)

    def fold(self, cards: Sequence[int], start: int = config.BASE_OFFSET) -> int:
        t = self._t
        cursor = start
        for c in cards:
            cursor = t[cursor + c]
        return cursor

    def eval_board(self, board: Sequence[int]) -> int:
        """Fold a complete 5 card board into a reusable state (not a rank)."""
        t = self._t
        v = t[config.BASE_OFFSET + board[0]]
        v = t[v + board[1]]
        v = t[v + board[2]]
        v = t[v + board[3]]
        return t[v + board[4]]

    def eval_hand(self, board_state: int, hole: Sequence[int]) -> int:
        """Rank of two hole cards on a board state from eval_board."""
        t = self._t
        return t[t[board_state + hole[0]] + hole[1]]

    def evaluate(self, cards: Sequence[int]) -> int:
        n = len(cards)
        if not (5 <= n <= 7):
            raise BadInputError(f"Hand evaluation needs 5 to 7 cards, got {n}")
        v = self.fold(cards)
        if n < 7:
            v = self._t[v]
        return v


def load_rank_table(path: str, expected_size: int = config.HAND_RANKS_SIZE) -> RankTable:
    if not os.path.exists(path):
        raise TableNotLoadedError(f"Hand ranking table not found: {path}")
    nbytes = os.path.getsize(path)
    if nbytes != expected_size * 4:
        raise MalformedTableError(
            f"{path} holds {nbytes} bytes, expected {expected_size * 4} ({expected_size} uint32 entries)"
        )
    logger.info("Loading hand ranking table from %s", path)
    values = np.fromfile(path, dtype="<u4").astype(np.uint32, copy=False)
    logger.info("Loaded %d hand ranking entries", values.size)
    return RankTable(values, path=path)


def _map_rank_table(path: str) -> RankTable:
    return RankTable(np.memmap(path, dtype="<u4", mode="r"), path=path)


# ------------------------------------------------------------
# Process-wide table: one-shot init, read-only afterwards
# ------------------------------------------------------------

_TABLE: Optional[RankTable] = None
_INIT_LOCK = threading.Lock()


def init_rank_table(path: Optional[str] = None) -> RankTable:
    global _TABLE
    with _INIT_LOCK:
        if _TABLE is None:
            _TABLE = load_rank_table(path or config.HAND_RANKS_PATH)
        return _TABLE


def get_rank_table() -> RankTable:
    if _TABLE is None:
        raise TableNotLoadedError("Hand ranking table not initialised; call init_rank_table() first")
    return _TABLE


def resolve(table: Optional[RankTable]) -> RankTable:
    return table if table is not None else get_rank_table()
