"""
Day 22: Monkey Market.

Every buyer's secret number evolves through a fixed pseudo-random step. A
buyer's price is the last digit of the secret. The monkey sells at the first
time a buyer's last four price changes match the chosen sequence; part two
finds the sequence that earns the most bananas over all buyers.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from ..core.parsing import parse_int

logger = logging.getLogger(__name__)

TITLE = "Monkey Market"

PRUNE_MODULUS = 16777216
STEPS = 2000
SEQUENCE_LENGTH = 4

# Price changes lie in [-9, 9], i.e. 19 values per position.
_BASE = 19


def mix(secret: int, value: int) -> int:
    return secret ^ value


def prune(secret: int) -> int:
    return secret % PRUNE_MODULUS


def evolve(secret):
    """Advance one or many secrets by a single step.

    Works on plain ints and on integer numpy arrays alike.
    """
    secret = prune(mix(secret, secret * 64))
    secret = prune(mix(secret, secret // 32))
    return prune(mix(secret, secret * 2048))


def price_change(secret: int) -> Tuple[int, int]:
    """Return the next secret and the change in price it brings."""
    nxt = evolve(secret)
    return nxt, nxt % 10 - secret % 10


def secret_history(secrets: Sequence[int], steps: int = STEPS) -> np.ndarray:
    """Return a ``(steps + 1, buyers)`` array of every buyer's secret over time."""
    history = np.empty((steps + 1, len(secrets)), dtype=np.int64)
    history[0] = secrets
    for i in range(steps):
        history[i + 1] = evolve(history[i])
    return history


def best_sequence_bananas(history: np.ndarray) -> int:
    prices = history % 10
    changes = np.diff(prices, axis=0) + 9
    span = len(changes) - SEQUENCE_LENGTH + 1
    if span <= 0:
        return 0
    codes = np.zeros((span, history.shape[1]), dtype=np.int64)
    for k in range(SEQUENCE_LENGTH):
        codes = codes * _BASE + changes[k:k + span]
    # The sale for a sequence ending at change k happens at price k + 1.
    sale_prices = prices[SEQUENCE_LENGTH:]

    totals = np.zeros(_BASE ** SEQUENCE_LENGTH, dtype=np.int64)
    for buyer in range(history.shape[1]):
        seen, first = np.unique(codes[:, buyer], return_index=True)
        np.add.at(totals, seen, sale_prices[first, buyer])
    return int(totals.max())


def solve(text: str) -> Tuple[int, int]:
    secrets: List[int] = [parse_int(token, "secret") for token in text.split()]
    history = secret_history(secrets)
    logger.debug("Simulated %d buyers for %d steps", len(secrets), STEPS)
    return int(history[-1].sum()), best_sequence_bananas(history)
