"""Round evaluation engine for the scratch game."""

from .errors import (
    ScratchGameError,
    ConfigurationError,
    BoardGenerationError,
    RewardCalculationError,
    InputContractError,
)
from .models import (
    StandardSymbol,
    BonusSymbol,
    Symbol,
    CellWeights,
    BonusWeights,
    WeightTable,
    CountPattern,
    LinePattern,
    WinPattern,
    GameConfig,
    Grid,
    RoundResult,
    SimulationReport,
    IMPACTS,
    PATTERN_GROUPS,
)
from .sampler import sample
from .board import generate_grid, BONUS_CELL_PERCENT
from .matcher import evaluate_patterns, MatchRecord
from .reward import calculate_reward
from .result import build_result
from .scratchgame import ScratchGame, play_round, save_result
from .simulation import simulate

__all__ = [
    # Errors
    "ScratchGameError",
    "ConfigurationError",
    "BoardGenerationError",
    "RewardCalculationError",
    "InputContractError",
    # Models
    "StandardSymbol",
    "BonusSymbol",
    "Symbol",
    "CellWeights",
    "BonusWeights",
    "WeightTable",
    "CountPattern",
    "LinePattern",
    "WinPattern",
    "GameConfig",
    "Grid",
    "RoundResult",
    "SimulationReport",
    "IMPACTS",
    "PATTERN_GROUPS",
    # Pipeline
    "sample",
    "generate_grid",
    "BONUS_CELL_PERCENT",
    "evaluate_patterns",
    "MatchRecord",
    "calculate_reward",
    "build_result",
    "play_round",
    "save_result",
    "ScratchGame",
    "simulate",
]
