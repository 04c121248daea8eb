"""
Pydantic models for the engine layer.

This module contains every data model the round pipeline passes around: the
symbol catalog, weight tables, win patterns, the core game configuration, the
generated grid and the reported results. The pipeline stages themselves
(sampler, board, matcher, reward) live in their own modules.
"""

from typing import Annotated, Any, Dict, Iterator, List, Literal, Optional, Tuple, Union, get_args
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    computed_field,
    field_validator,
    model_validator,
)


# Type aliases
Impact = Literal["multiply_reward", "extra_bonus", "miss"]
PatternGroup = Literal[
    "same_symbols",
    "horizontally_linear_symbols",
    "vertically_linear_symbols",
    "ltr_diagonally_linear_symbols",
    "rtl_diagonally_linear_symbols",
]
Coordinate = Tuple[NonNegativeInt, NonNegativeInt]
Weight = Annotated[float, Field(ge=0)]

IMPACTS: Tuple[str, ...] = get_args(Impact)
PATTERN_GROUPS: Tuple[str, ...] = get_args(PatternGroup)


class _SymbolBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("symbol name must not be blank")
        return value


class StandardSymbol(_SymbolBase):
    """A symbol whose reward multiplier pays out when it wins a pattern."""
    kind: Literal["standard"] = "standard"
    reward_multiplier: float = Field(..., gt=0)

    @property
    def is_bonus(self) -> bool:
        return False


class BonusSymbol(_SymbolBase):
    """
    A symbol that modifies the reward of a winning round.

    Attributes:
        impact: How the symbol changes the running total
        reward_multiplier: Factor applied by ``multiply_reward``
        extra_amount: Amount added by ``extra_bonus``
    """
    kind: Literal["bonus"] = "bonus"
    impact: Impact
    reward_multiplier: float = Field(default=0.0, ge=0)
    extra_amount: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _single_effect(self) -> "BonusSymbol":
        if self.impact != "miss" and self.reward_multiplier > 0 and self.extra_amount > 0:
            raise ValueError(
                f"Bonus symbol '{self.name}' cannot have both a positive reward multiplier "
                f"and a positive extra amount"
            )
        return self

    @property
    def is_bonus(self) -> bool:
        return True

    @property
    def has_effect(self) -> bool:
        """Whether landing this symbol can change the reward."""
        return self.impact != "miss"


Symbol = Union[StandardSymbol, BonusSymbol]


class CellWeights(BaseModel):
    """Weight table for the standard symbols of exactly one cell."""
    model_config = ConfigDict(frozen=True)

    category: Literal["standard"] = "standard"
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    weights: Dict[str, Weight] = Field(..., min_length=1)

    def matches(self, row: int, column: int, bonus: bool) -> bool:
        return not bonus and self.row == row and self.column == column


class BonusWeights(BaseModel):
    """Board-wide weight table used for every bonus-category cell."""
    model_config = ConfigDict(frozen=True)

    category: Literal["bonus"] = "bonus"
    weights: Dict[str, Weight] = Field(..., min_length=1)

    def matches(self, row: int, column: int, bonus: bool) -> bool:
        return bonus


WeightTable = Union[CellWeights, BonusWeights]


class _PatternBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    reward_multiplier: float = Field(..., gt=0)
    group: PatternGroup


class CountPattern(_PatternBase):
    """Wins when a standard symbol appears at least ``count`` times anywhere."""
    when: Literal["same_symbols"] = "same_symbols"
    count: int = Field(..., ge=1)


class LinePattern(_PatternBase):
    """Wins when every cell of one covered area holds the same standard symbol."""
    when: Literal["linear_symbols"] = "linear_symbols"
    covered_areas: Tuple[Tuple[Coordinate, ...], ...] = Field(..., min_length=1)

    @field_validator("covered_areas")
    @classmethod
    def _areas_not_empty(cls, value: Tuple[Tuple[Coordinate, ...], ...]) -> Tuple[Tuple[Coordinate, ...], ...]:
        if any(len(area) == 0 for area in value):
            raise ValueError("covered areas must not contain empty lines")
        return value


WinPattern = Union[CountPattern, LinePattern]


class GameConfig(BaseModel):
    """Validated, immutable configuration shared by every round."""
    model_config = ConfigDict(frozen=True)

    rows: int = Field(..., gt=0)
    columns: int = Field(..., gt=0)
    symbols: Dict[str, Symbol] = Field(..., min_length=1)
    weight_tables: List[WeightTable] = Field(..., min_length=1)
    patterns: List[WinPattern] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _catalog_keys_match_names(self) -> "GameConfig":
        for key, symbol in self.symbols.items():
            if key != symbol.name:
                raise ValueError(f"Symbol catalog key '{key}' does not match symbol name '{symbol.name}'")
        return self


class Grid(BaseModel):
    """
    A fully populated ``rows x columns`` matrix of symbols.

    Owned by a single round and never modified after generation.
    """
    model_config = ConfigDict(frozen=True)

    cells: List[List[Symbol]]

    @model_validator(mode="after")
    def _rectangular(self) -> "Grid":
        widths = {len(row) for row in self.cells}
        if len(widths) > 1:
            raise ValueError(f"Grid rows must all have the same length, got {sorted(widths)}")
        return self

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def columns(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def cell(self, row: int, column: int) -> Symbol:
        return self.cells[row][column]

    def symbols(self) -> Iterator[Symbol]:
        """Iterate over the cells in row-major order."""
        for row in self.cells:
            yield from row

    def names(self) -> List[List[str]]:
        return [[symbol.name for symbol in row] for row in self.cells]


class RoundResult(BaseModel):
    """Final snapshot of one evaluated round."""
    model_config = ConfigDict(frozen=True)

    matrix: List[List[str]]
    reward: float
    applied_winning_combinations: Dict[str, List[str]] = Field(default_factory=dict)
    applied_bonus_symbol: List[str] = Field(default_factory=list)

    @property
    def is_win(self) -> bool:
        return self.reward > 0

    def to_output(self) -> Dict[str, Any]:
        """Serializable form with the empty optional members left out."""
        optional = ("applied_winning_combinations", "applied_bonus_symbol")
        return self.model_dump(exclude={name for name in optional if not getattr(self, name)})


class SimulationReport(BaseModel):
    """Aggregate statistics over a batch of independent rounds."""
    rounds: int = 0
    seed: Optional[int] = None
    betting_amount: float
    total_wagered: float = 0.0
    total_won: float = 0.0
    winning_rounds: int = 0
    bonus_rounds: int = 0
    max_reward: float = 0.0
    pattern_hits: Dict[str, int] = Field(default_factory=dict)
    duration_seconds: float = 0.0

    @computed_field
    @property
    def rtp(self) -> float:
        """Return to player, in percent of the total wagered."""
        return 100 * self.total_won / self.total_wagered if self.total_wagered else 0.0

    @computed_field
    @property
    def hit_rate(self) -> float:
        """Share of rounds with a positive reward, in percent."""
        return 100 * self.winning_rounds / self.rounds if self.rounds else 0.0
