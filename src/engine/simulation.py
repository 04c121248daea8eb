import math
import random
import time
from typing import Callable, Optional

from .errors import RewardCalculationError, require
from .models import GameConfig, RoundResult, SimulationReport
from .scratchgame import play_round


def simulate(
    config: GameConfig,
    betting_amount: float,
    rounds: int,
    seed: Optional[int] = None,
    on_round: Optional[Callable[[int, RoundResult], None]] = None,
) -> SimulationReport:
    """
    Play many independent rounds and collect return statistics.

    A single ``random.Random(seed)`` drives all rounds in sequence, so the
    same seed always yields the same report (apart from the duration).

    Args:
        config: Validated game configuration
        betting_amount: Amount bet on every round
        rounds: Number of rounds to play
        seed: Optional random seed for reproducibility
        on_round: Optional callback called with the round index and result

    Returns:
        SimulationReport with the aggregated statistics
    """
    require(config, "config")
    if not math.isfinite(betting_amount) or betting_amount <= 0:
        raise RewardCalculationError(f"The betting amount must be greater than 0, got {betting_amount}")
    if rounds < 1:
        raise ValueError(f"Number of rounds must be at least 1, got {rounds}")

    rng = random.Random(seed)
    report = SimulationReport(seed=seed, betting_amount=betting_amount)
    started = time.perf_counter()

    for index in range(rounds):
        result = play_round(config, betting_amount, rng)

        report.rounds += 1
        report.total_wagered += betting_amount
        report.total_won += result.reward
        report.max_reward = max(report.max_reward, result.reward)
        if result.is_win:
            report.winning_rounds += 1
        if result.applied_bonus_symbol:
            report.bonus_rounds += 1
        for names in result.applied_winning_combinations.values():
            for name in names:
                report.pattern_hits[name] = report.pattern_hits.get(name, 0) + 1

        if on_round:
            on_round(index, result)

    report.duration_seconds = time.perf_counter() - started
    return report
