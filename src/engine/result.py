"""Reduction of an evaluated round to its reported result."""

from typing import Dict, List

from .errors import RewardCalculationError, require
from .matcher import MatchRecord
from .models import Grid, RoundResult


def applied_winning_combinations(matches: MatchRecord) -> Dict[str, List[str]]:
    """Names of the kept patterns per symbol, symbols and patterns both sorted."""
    applied: Dict[str, List[str]] = {}
    for symbol, by_group in sorted(matches.items(), key=lambda item: item[0].name):
        names = sorted(pattern.name for pattern in by_group.values())
        if names:
            applied[symbol.name] = names
    return applied


def build_result(grid: Grid, reward: float, matches: MatchRecord) -> RoundResult:
    """
    Build the RoundResult handed to reporting.

    Bonus symbols are only listed for rounds where at least one pattern
    matched, and only those that can change the reward (``miss`` is left out).
    A ``miss`` never counts as an applied bonus, even though it sits on the grid.

    Raises:
        RewardCalculationError: If the reward is negative
    """
    require(grid, "grid")
    require(reward, "reward")
    require(matches, "matches")

    if reward < 0:
        raise RewardCalculationError(f"Calculated reward cannot be negative, got {reward}")

    applied = applied_winning_combinations(matches)
    bonus_symbols: List[str] = []
    if applied:
        bonus_symbols = [s.name for s in grid.symbols() if s.is_bonus and s.has_effect]

    return RoundResult(
        matrix=grid.names(),
        reward=reward,
        applied_winning_combinations=applied,
        applied_bonus_symbol=bonus_symbols,
    )
