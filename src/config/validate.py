"""
Game configuration validation.

Validates:
1. Board dimensions (positive rows and columns)
2. Symbols (types, impacts, multipliers and extra amounts)
3. Probabilities (known symbols, non-negative weights, exactly one table per
   cell inside the board, one board-wide bonus table)
4. Win combinations (conditions, groups, counts, covered area coordinates)

Every problem is collected as a ConfigIssue; the GameConfig is only built
when no errors were found.
"""

from typing import Any, Dict, List, Set, Tuple

from pydantic import ValidationError

from ..engine.models import (
    IMPACTS,
    PATTERN_GROUPS,
    BonusSymbol,
    BonusWeights,
    CellWeights,
    CountPattern,
    GameConfig,
    LinePattern,
    StandardSymbol,
)
from .cascade import FATAL, CRITICAL, HIGH, MEDIUM, LOW
from .models import ConfigFile, ConfigIssue, SymbolSpec, ValidationReport
from .parsing import parse_config, parse_coordinate


CONDITIONS = ("same_symbols", "linear_symbols")

Issues = Tuple[List[ConfigIssue], List[ConfigIssue]]


def validate_dimensions(config_file: ConfigFile) -> List[ConfigIssue]:
    """Rows and columns must both be positive."""
    errors: List[ConfigIssue] = []
    for field in ("rows", "columns"):
        value = getattr(config_file, field)
        if value <= 0:
            errors.append(ConfigIssue(
                code="INVALID_DIMENSIONS",
                message=f"The number of matrix {field} must be positive, but was {value}",
                path=field,
                cascade_level=CRITICAL
            ))
    return errors


def validate_symbols(symbols: Dict[str, SymbolSpec]) -> List[ConfigIssue]:
    """Validate every symbol definition."""
    errors: List[ConfigIssue] = []

    if not symbols:
        errors.append(ConfigIssue(
            code="NO_SYMBOLS",
            message="Symbols section cannot be empty",
            path="symbols",
            cascade_level=CRITICAL
        ))
        return errors

    for name, entry in symbols.items():
        path = f"symbols.{name}"

        if not name.strip():
            errors.append(ConfigIssue(
                code="INVALID_SYMBOL_NAME",
                message="The name of a symbol must not be blank",
                path=path,
                cascade_level=CRITICAL
            ))

        if entry.type == "standard":
            if entry.reward_multiplier is None or entry.reward_multiplier <= 0:
                errors.append(ConfigIssue(
                    code="INVALID_REWARD_MULTIPLIER",
                    message=f"Standard symbol '{name}' needs a positive reward_multiplier, got {entry.reward_multiplier}",
                    path=path,
                    cascade_level=MEDIUM
                ))
            continue

        multiplier = entry.reward_multiplier or 0.0
        extra = entry.extra or 0.0

        if entry.impact not in IMPACTS:
            errors.append(ConfigIssue(
                code="INVALID_IMPACT",
                message=f"Bonus symbol '{name}' has impact {entry.impact!r}, expected one of {', '.join(IMPACTS)}",
                path=path,
                cascade_level=CRITICAL
            ))
        if multiplier < 0:
            errors.append(ConfigIssue(
                code="INVALID_REWARD_MULTIPLIER",
                message=f"The reward multiplier of bonus symbol '{name}' cannot be negative",
                path=path,
                cascade_level=MEDIUM
            ))
        elif entry.impact == "multiply_reward" and multiplier == 0:
            errors.append(ConfigIssue(
                code="INVALID_REWARD_MULTIPLIER",
                message=f"Bonus symbol '{name}' multiplies the reward and needs a positive reward_multiplier",
                path=path,
                cascade_level=MEDIUM
            ))
        if extra < 0:
            errors.append(ConfigIssue(
                code="NEGATIVE_EXTRA",
                message=f"The extra amount of bonus symbol '{name}' cannot be negative",
                path=path,
                cascade_level=MEDIUM
            ))
        if entry.impact != "miss" and multiplier > 0 and extra > 0:
            errors.append(ConfigIssue(
                code="CONFLICTING_BONUS_VALUES",
                message=f"Bonus symbol '{name}' cannot have both a positive reward_multiplier and a positive extra",
                path=path,
                cascade_level=MEDIUM
            ))

    return errors


def _validate_weights(weights: Dict[str, float], symbols: Dict[str, SymbolSpec], path: str) -> List[ConfigIssue]:
    errors: List[ConfigIssue] = []

    if not weights:
        errors.append(ConfigIssue(
            code="EMPTY_WEIGHTS",
            message=f"Symbol weights at {path} cannot be empty",
            path=path,
            cascade_level=MEDIUM
        ))
        return errors

    for name, weight in weights.items():
        if name not in symbols:
            errors.append(ConfigIssue(
                code="UNKNOWN_SYMBOL",
                message=f"Symbol '{name}' referenced at {path} is not defined in the symbols section",
                path=f"{path}.{name}",
                cascade_level=CRITICAL
            ))
        if weight < 0:
            errors.append(ConfigIssue(
                code="NEGATIVE_WEIGHT",
                message=f"Invalid weight {weight} for symbol '{name}' at {path}",
                path=f"{path}.{name}",
                cascade_level=MEDIUM
            ))

    if all(weight >= 0 for weight in weights.values()) and sum(weights.values()) <= 0:
        errors.append(ConfigIssue(
            code="ZERO_WEIGHTS",
            message=f"Symbol weights at {path} need at least one positive weight",
            path=path,
            cascade_level=MEDIUM
        ))

    return errors


def validate_probabilities(config_file: ConfigFile) -> Issues:
    """Validate weight tables against the symbols and the board dimensions."""
    errors: List[ConfigIssue] = []
    warnings: List[ConfigIssue] = []
    symbols = config_file.symbols
    probabilities = config_file.probabilities
    used: Set[str] = set()
    covered: Set[Tuple[int, int]] = set()

    for i, cell in enumerate(probabilities.standard_symbols):
        path = f"probabilities.standard_symbols[{i}]"
        coordinates = (cell.row, cell.column)

        errors.extend(_validate_weights(cell.symbols, symbols, f"{path}.symbols"))
        used.update(cell.symbols)

        for name in cell.symbols:
            if name in symbols and symbols[name].type == "bonus":
                warnings.append(ConfigIssue(
                    code="BONUS_SYMBOL_IN_CELL_TABLE",
                    message=f"Bonus symbol '{name}' is listed in the standard weights of cell {cell.row}:{cell.column}",
                    path=f"{path}.symbols.{name}",
                    cascade_level=LOW
                ))

        if not (0 <= cell.row < config_file.rows and 0 <= cell.column < config_file.columns):
            errors.append(ConfigIssue(
                code="CELL_OUT_OF_BOUNDS",
                message=(
                    f"Weights for cell {cell.row}:{cell.column} are outside the "
                    f"{config_file.rows}x{config_file.columns} matrix"
                ),
                path=path,
                cascade_level=HIGH
            ))
        elif coordinates in covered:
            errors.append(ConfigIssue(
                code="DUPLICATE_CELL",
                message=f"Weights for cell {cell.row}:{cell.column} are defined more than once",
                path=path,
                cascade_level=HIGH
            ))
        covered.add(coordinates)

    gaps = [
        f"{row}:{column}"
        for row in range(config_file.rows)
        for column in range(config_file.columns)
        if (row, column) not in covered
    ]
    if gaps:
        errors.append(ConfigIssue(
            code="MISSING_CELL_WEIGHTS",
            message=f"Weights not provided for matrix cells: {', '.join(gaps)}",
            path="probabilities.standard_symbols",
            cascade_level=HIGH
        ))

    if probabilities.bonus_symbols is None:
        errors.append(ConfigIssue(
            code="MISSING_BONUS_WEIGHTS",
            message="Board-wide bonus symbol weights are missing",
            path="probabilities.bonus_symbols",
            cascade_level=HIGH
        ))
    else:
        path = "probabilities.bonus_symbols.symbols"
        bonus_weights = probabilities.bonus_symbols.symbols
        errors.extend(_validate_weights(bonus_weights, symbols, path))
        used.update(bonus_weights)

        for name in bonus_weights:
            if name in symbols and symbols[name].type == "standard":
                warnings.append(ConfigIssue(
                    code="STANDARD_SYMBOL_IN_BONUS_TABLE",
                    message=f"Standard symbol '{name}' is listed in the bonus symbol weights",
                    path=f"{path}.{name}",
                    cascade_level=LOW
                ))

    for name in symbols:
        if name not in used:
            warnings.append(ConfigIssue(
                code="UNUSED_SYMBOL",
                message=f"Symbol '{name}' has no weight in any table and can never appear",
                path=f"symbols.{name}",
                cascade_level=LOW
            ))

    return errors, warnings


def validate_win_combinations(config_file: ConfigFile) -> Issues:
    """Validate win combination conditions, groups and covered areas."""
    errors: List[ConfigIssue] = []
    warnings: List[ConfigIssue] = []

    if not config_file.win_combinations:
        errors.append(ConfigIssue(
            code="NO_WIN_COMBINATIONS",
            message="Win combinations section cannot be empty",
            path="win_combinations",
            cascade_level=CRITICAL
        ))
        return errors, warnings

    for name, entry in config_file.win_combinations.items():
        path = f"win_combinations.{name}"

        if entry.when not in CONDITIONS:
            errors.append(ConfigIssue(
                code="UNKNOWN_CONDITION",
                message=f"Win combination '{name}' has unexpected 'when' value: '{entry.when}'",
                path=f"{path}.when",
                cascade_level=CRITICAL
            ))
        if entry.group not in PATTERN_GROUPS:
            errors.append(ConfigIssue(
                code="UNKNOWN_GROUP",
                message=f"No win combination group with name '{entry.group}' found",
                path=f"{path}.group",
                cascade_level=CRITICAL
            ))
        if entry.reward_multiplier <= 0:
            errors.append(ConfigIssue(
                code="INVALID_REWARD_MULTIPLIER",
                message=f"Win combination '{name}' needs a positive reward_multiplier, got {entry.reward_multiplier}",
                path=f"{path}.reward_multiplier",
                cascade_level=MEDIUM
            ))

        if entry.when == "same_symbols":
            if entry.count is None or entry.count < 1:
                errors.append(ConfigIssue(
                    code="INVALID_COUNT",
                    message=f"Win combination '{name}' needs a count of at least 1, got {entry.count}",
                    path=f"{path}.count",
                    cascade_level=MEDIUM
                ))
            if entry.covered_areas is not None:
                warnings.append(ConfigIssue(
                    code="IGNORED_COVERED_AREAS",
                    message=f"Covered areas of same_symbols combination '{name}' are ignored",
                    path=f"{path}.covered_areas",
                    cascade_level=LOW
                ))

        elif entry.when == "linear_symbols":
            if entry.count is not None:
                warnings.append(ConfigIssue(
                    code="IGNORED_COUNT",
                    message=f"Count of linear_symbols combination '{name}' is ignored",
                    path=f"{path}.count",
                    cascade_level=LOW
                ))
            errors.extend(_validate_covered_areas(name, entry.covered_areas, config_file))

    return errors, warnings


def _validate_covered_areas(name: str, covered_areas: Any, config_file: ConfigFile) -> List[ConfigIssue]:
    errors: List[ConfigIssue] = []
    path = f"win_combinations.{name}.covered_areas"

    if not covered_areas or any(not area for area in covered_areas):
        errors.append(ConfigIssue(
            code="EMPTY_COVERED_AREAS",
            message=f"Linear combination '{name}' needs non-empty covered areas",
            path=path,
            cascade_level=MEDIUM
        ))
        return errors

    for i, area in enumerate(covered_areas):
        for text in area:
            if not isinstance(text, str):
                errors.append(ConfigIssue(
                    code="INVALID_COORDINATE",
                    message=(
                        f"Coordinate {text!r} in '{name}' is not a 'row:column' string; "
                        f"quote coordinates in YAML files (e.g. \"1:2\")"
                    ),
                    path=f"{path}[{i}]",
                    cascade_level=CRITICAL
                ))
                continue

            coordinates = parse_coordinate(text)
            if coordinates is None:
                errors.append(ConfigIssue(
                    code="INVALID_COORDINATE",
                    message=f"Invalid coordinate '{text}' in '{name}', expected 'row:column'",
                    path=f"{path}[{i}]",
                    cascade_level=CRITICAL
                ))
                continue

            row, column = coordinates
            if row >= config_file.rows or column >= config_file.columns:
                errors.append(ConfigIssue(
                    code="COORDINATE_OUT_OF_BOUNDS",
                    message=(
                        f"Coordinate {text} in '{name}' is outside the "
                        f"{config_file.rows}x{config_file.columns} matrix"
                    ),
                    path=f"{path}[{i}]",
                    cascade_level=HIGH
                ))

    return errors


def build_game_config(config_file: ConfigFile) -> GameConfig:
    """Build the engine configuration from an already validated file."""
    symbols = {}
    for name, entry in config_file.symbols.items():
        if entry.type == "standard":
            symbols[name] = StandardSymbol(name=name, reward_multiplier=entry.reward_multiplier)
        else:
            symbols[name] = BonusSymbol(
                name=name,
                impact=entry.impact,
                reward_multiplier=entry.reward_multiplier or 0.0,
                extra_amount=entry.extra or 0.0,
            )

    weight_tables = [
        CellWeights(row=cell.row, column=cell.column, weights=cell.symbols)
        for cell in config_file.probabilities.standard_symbols
    ]
    weight_tables.append(BonusWeights(weights=config_file.probabilities.bonus_symbols.symbols))

    patterns = []
    for name, entry in config_file.win_combinations.items():
        if entry.when == "same_symbols":
            patterns.append(CountPattern(
                name=name,
                reward_multiplier=entry.reward_multiplier,
                group=entry.group,
                count=entry.count,
            ))
        else:
            patterns.append(LinePattern(
                name=name,
                reward_multiplier=entry.reward_multiplier,
                group=entry.group,
                covered_areas=[[parse_coordinate(text) for text in area] for area in entry.covered_areas],
            ))

    return GameConfig(
        rows=config_file.rows,
        columns=config_file.columns,
        symbols=symbols,
        weight_tables=weight_tables,
        patterns=patterns,
    )


def validate(data: Any) -> ValidationReport:
    """
    Main validation function: validates raw configuration data.

    Returns a ValidationReport with:
    - valid: True if the configuration passes all checks
    - errors: List of configuration errors
    - warnings: List of warnings (e.g., symbols that can never appear)
    - config: The built GameConfig (only when valid)
    """
    config_file, parse_errors = parse_config(data)
    if config_file is None:
        return ValidationReport(valid=False, errors=parse_errors)

    all_errors: List[ConfigIssue] = []
    all_warnings: List[ConfigIssue] = []

    all_errors.extend(validate_dimensions(config_file))
    all_errors.extend(validate_symbols(config_file.symbols))

    probability_errors, probability_warnings = validate_probabilities(config_file)
    all_errors.extend(probability_errors)
    all_warnings.extend(probability_warnings)

    combination_errors, combination_warnings = validate_win_combinations(config_file)
    all_errors.extend(combination_errors)
    all_warnings.extend(combination_warnings)

    if all_errors:
        return ValidationReport(valid=False, errors=all_errors, warnings=all_warnings)

    try:
        config = build_game_config(config_file)
    except ValidationError as e:
        all_errors.extend(
            ConfigIssue(
                code="BUILD_ERROR",
                message=f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}",
                cascade_level=FATAL
            )
            for err in e.errors()
        )
        return ValidationReport(valid=False, errors=all_errors, warnings=all_warnings)

    return ValidationReport(valid=True, warnings=all_warnings, config=config)
