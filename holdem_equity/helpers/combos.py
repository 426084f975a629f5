from __future__ import annotations
from itertools import combinations
from math import comb
from typing import Iterator, Sequence, Tuple, TypeVar

T = TypeVar("T")


def count(n: int, k: int) -> int:
    """Number of k-combinations of n items."""
    return comb(n, k)


def generator(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """
    Lazy, finite, non-restartable stream of k-item subsets of items.
    k == 0 yields a single empty tuple.
    """
    return combinations(items, k)
