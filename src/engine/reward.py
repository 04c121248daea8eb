"""Reward aggregation for an evaluated grid."""

from math import isfinite, prod

from .errors import RewardCalculationError, require
from .matcher import MatchRecord
from .models import BonusSymbol, Grid


def apply_bonus(symbol: BonusSymbol, total: float) -> float:
    """
    Apply one bonus symbol to the running total.

    Args:
        symbol: The bonus symbol found on the grid
        total: Running total before this symbol

    Returns:
        The new running total

    Raises:
        RewardCalculationError: If the impact is unknown or the result is not positive
    """
    if symbol.impact == "multiply_reward":
        result = total * symbol.reward_multiplier
    elif symbol.impact == "extra_bonus":
        result = total + symbol.extra_amount
    elif symbol.impact == "miss":
        result = total
    else:
        raise RewardCalculationError(f"Unexpected bonus symbol impact: '{symbol.impact}'")

    if result <= 0:
        raise RewardCalculationError(
            f"Bonus symbol '{symbol.name}' produced a non-positive reward ({result})"
        )
    return result


def calculate_subtotal(betting_amount: float, matches: MatchRecord) -> float:
    """Sum the pattern-adjusted reward of every winning symbol."""
    return sum(
        betting_amount * symbol.reward_multiplier * prod(p.reward_multiplier for p in by_group.values())
        for symbol, by_group in matches.items()
        if not symbol.is_bonus
    )


def calculate_reward(betting_amount: float, grid: Grid, matches: MatchRecord) -> float:
    """
    Calculate the total reward of a round.

    The subtotal from winning symbols is computed first. A zero subtotal is a
    lost round and returns 0 without looking at bonus symbols. Otherwise every
    bonus symbol on the grid is applied to the total in row-major order.

    Args:
        betting_amount: Amount bet on the round, must be positive
        grid: The evaluated grid
        matches: MatchRecord produced by the pattern matcher

    Returns:
        The final reward

    Raises:
        RewardCalculationError: If the bet is not positive or a bonus misbehaves
    """
    require(betting_amount, "betting_amount")
    require(grid, "grid")
    require(matches, "matches")

    if not isfinite(betting_amount) or betting_amount <= 0:
        raise RewardCalculationError(f"The betting amount must be greater than 0, got {betting_amount}")

    total = calculate_subtotal(betting_amount, matches)
    if total == 0:
        return 0.0

    for symbol in grid.symbols():
        if symbol.is_bonus:
            total = apply_bonus(symbol, total)

    return total
