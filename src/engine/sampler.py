"""Weighted random selection of symbols."""

import random
from typing import Mapping, TypeVar

from .errors import ConfigurationError

K = TypeVar("K")


def sample(weights: Mapping[K, float], rng: random.Random) -> K:
    """
    Draw one key from a table of relative weights.

    Exactly one value is drawn from ``rng`` per call, uniformly from (0, 100].
    Keys are walked in ascending weight order (ties keep insertion order)
    while accumulating their share of the total as a percentage; the first
    key whose cumulative percentage exceeds the draw is returned. If rounding
    leaves the draw above every cumulative value, the heaviest key wins.

    Args:
        weights: Mapping of key to non-negative weight (need not sum to 1)
        rng: Random source

    Returns:
        The selected key

    Raises:
        ConfigurationError: If the table is empty or all weights are zero
    """
    if not weights:
        raise ConfigurationError("Cannot sample from an empty weight table")

    draw = 100.0 - 100.0 * rng.random()
    total = sum(weights.values())
    if total <= 0:
        raise ConfigurationError("Cannot sample from a weight table without a positive weight")

    cumulative = 0.0
    for key, weight in sorted(weights.items(), key=lambda item: item[1]):
        cumulative += 100.0 * weight / total
        if cumulative > draw:
            return key

    return max(weights, key=weights.__getitem__)
