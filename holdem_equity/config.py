# holdem_equity/config.py
"""
Process-wide settings. Values can be overridden from the environment
or from a .env file in the working directory.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not an integer; using %d", name, raw, default)
        return default


def env_choice(name: str, default: str, choices: tuple) -> str:
    raw = os.getenv(name, default).upper()
    if raw not in choices:
        logger.warning("Ignoring %s=%r, expected one of %s", name, raw, ", ".join(choices))
        return default
    return raw


# Card alphabet (rank-major, suit-minor encoding depends on these orders)
RANKS = "23456789TJQKA"
SUITS = "cdhs"

# Two Plus Two style perfect-hash table
HAND_RANKS_SIZE = 32_487_834
BASE_OFFSET = 53
HAND_RANKS_PATH = os.getenv("HOLDEM_EQUITY_HAND_RANKS", "HandRanks.dat")

# Parallel equity
DEFAULT_WORKERS = env_int("HOLDEM_EQUITY_WORKERS", os.cpu_count() or 1)

LOG_LEVEL = env_choice("HOLDEM_EQUITY_LOG_LEVEL", "WARNING", LOG_LEVELS)
