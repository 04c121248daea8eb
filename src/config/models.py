"""Data models for game configuration files and their validation."""

from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from ..engine.models import GameConfig


class SymbolSpec(BaseModel):
    """A symbol entry of the ``symbols`` section."""
    model_config = ConfigDict(extra='forbid')

    type: Literal['standard', 'bonus']
    reward_multiplier: Optional[float] = None
    impact: Optional[str] = None
    extra: Optional[float] = None


class CellProbabilitySpec(BaseModel):
    """Standard symbol weights for a single cell."""
    model_config = ConfigDict(extra='forbid')

    row: int
    column: int
    symbols: Dict[str, float] = Field(default_factory=dict)


class BonusProbabilitySpec(BaseModel):
    """Board-wide bonus symbol weights."""
    model_config = ConfigDict(extra='forbid')

    symbols: Dict[str, float] = Field(default_factory=dict)


class ProbabilitiesSpec(BaseModel):
    model_config = ConfigDict(extra='forbid')

    standard_symbols: List[CellProbabilitySpec] = Field(default_factory=list)
    bonus_symbols: Optional[BonusProbabilitySpec] = None


class WinCombinationSpec(BaseModel):
    """A win combination entry of the ``win_combinations`` section."""
    model_config = ConfigDict(extra='forbid')

    reward_multiplier: float
    when: str
    group: str
    count: Optional[int] = None
    # YAML reads unquoted coordinates such as 1:2 as base-60 integers
    covered_areas: Optional[List[List[Union[str, int]]]] = None


class ConfigFile(BaseModel):
    """Raw structure of a game configuration file."""
    model_config = ConfigDict(extra='forbid')

    rows: int
    columns: int
    symbols: Dict[str, SymbolSpec]
    probabilities: ProbabilitiesSpec
    win_combinations: Dict[str, WinCombinationSpec]


class ConfigIssue(BaseModel):
    """A single configuration problem."""
    code: str
    message: str
    path: Optional[str] = None
    cascade_level: int = 0  # 0=FATAL, 1=CRITICAL, 2=HIGH, 3=MEDIUM, 4=LOW


class ValidationReport(BaseModel):
    """Result of configuration validation."""
    valid: bool
    errors: List[ConfigIssue] = Field(default_factory=list)
    warnings: List[ConfigIssue] = Field(default_factory=list)
    config: Optional[GameConfig] = None
