import json
import random
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ConfigDict

from .board import generate_grid
from .errors import require
from .matcher import evaluate_patterns
from .models import GameConfig, RoundResult
from .result import build_result
from .reward import calculate_reward


def play_round(config: GameConfig, betting_amount: float, rng: random.Random) -> RoundResult:
    """
    Evaluate one round: generate a grid, match patterns, aggregate the reward.

    Every call builds its own Grid and MatchRecord; only ``rng`` is shared
    with the caller.

    Args:
        config: Validated game configuration
        betting_amount: Amount bet on the round
        rng: Random source, consumed ``2 * rows * columns`` times

    Returns:
        The RoundResult of the round
    """
    require(config, "config")

    grid = generate_grid(config.symbols, config.weight_tables, config.rows, config.columns, rng)
    matches = evaluate_patterns(config.patterns, grid)
    reward = calculate_reward(betting_amount, grid, matches)
    return build_result(grid, reward, matches)


def save_result(result: RoundResult, path: str | Path) -> None:
    """
    Save a round result to a JSON file.

    Args:
        result: The result to save
        path: Path to save the result file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.to_output(), f, indent=2)


class ScratchGame(BaseModel):
    """
    Plays rounds of a configured scratch game.

    Holds the shared configuration and a seeded random generator, so a game
    created with a seed replays the same sequence of rounds.

    Attributes:
        config: The validated game configuration
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(cls, config_path: str | Path, seed: Optional[int] = None) -> "ScratchGame":
        """
        Factory method to create a game from a configuration file.

        Args:
            config_path: Path to a JSON or YAML game configuration
            seed: Optional random seed for reproducibility

        Returns:
            A new ScratchGame instance

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ConfigurationError: If the configuration cannot be read or is invalid
        """
        from ..config.loader import load_config

        return cls(config=load_config(config_path), seed=seed)

    def play(self, betting_amount: float) -> RoundResult:
        """Play one round with the game's random generator."""
        return play_round(self.config, betting_amount, self._rng)
