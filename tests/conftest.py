import os

import numpy as np
import pytest

from holdem_equity import config
from holdem_equity.engine import RankTable, load_rank_table


@pytest.fixture(scope="session")
def identity_table():
    # T[i] = i, so every fold just sums: rank = 53 + sum(cards)
    return RankTable(np.arange(1024, dtype=np.uint32))


@pytest.fixture(scope="session")
def hand_ranks():
    if not os.path.exists(config.HAND_RANKS_PATH):
        pytest.skip(f"{config.HAND_RANKS_PATH} not available")
    return load_rank_table(config.HAND_RANKS_PATH)
