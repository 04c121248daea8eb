"""Exceptions raised by the round evaluation pipeline."""

from typing import Any, List, Optional


class ScratchGameError(ValueError):
    """Base class for every error raised while evaluating a round."""


class ConfigurationError(ScratchGameError):
    """Malformed or inconsistent configuration reached the engine."""

    def __init__(self, message: str, issues: Optional[List[Any]] = None):
        super().__init__(message)
        self.issues = issues or []


class BoardGenerationError(ScratchGameError):
    """No weight table matched a cell, or the generated grid is degenerate."""


class RewardCalculationError(ScratchGameError):
    """The betting amount or a bonus application produced an invalid reward."""


class InputContractError(ScratchGameError):
    """A required value passed across a component boundary was missing."""


def require(value: Any, name: str) -> Any:
    """Return value, raising InputContractError if it is None."""
    if value is None:
        raise InputContractError(f"{name} cannot be None")
    return value
