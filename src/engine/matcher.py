"""
Win pattern evaluation.

Every configured pattern is checked against the grid independently. Matches
are merged into a MatchRecord that keeps, per symbol and pattern group, only
the best-paying pattern:

1. Count patterns: a standard symbol appearing at least ``count`` times
2. Line patterns: a covered area filled entirely by one standard symbol
3. Merge: a later candidate replaces the kept one only when its reward
   multiplier is strictly higher, so ties keep the first registered pattern
"""

from collections import Counter
from typing import Dict, Sequence, Set

from .errors import ConfigurationError, require
from .models import CountPattern, Grid, LinePattern, Symbol, WinPattern


MatchRecord = Dict[Symbol, Dict[str, WinPattern]]


def record_match(matches: MatchRecord, symbol: Symbol, pattern: WinPattern) -> None:
    """Offer a candidate, keeping the highest multiplier per (symbol, group)."""
    by_group = matches.setdefault(symbol, {})
    current = by_group.get(pattern.group)
    if current is None or pattern.reward_multiplier > current.reward_multiplier:
        by_group[pattern.group] = pattern


def match_count_pattern(pattern: CountPattern, grid: Grid, matches: MatchRecord) -> None:
    """Record every standard symbol that occurs at least ``pattern.count`` times."""
    tally = Counter(symbol for symbol in grid.symbols() if not symbol.is_bonus)
    for symbol, occurrences in tally.items():
        if occurrences >= pattern.count:
            record_match(matches, symbol, pattern)


def match_line_pattern(pattern: LinePattern, grid: Grid, matches: MatchRecord) -> None:
    """Record each symbol that fills one of the pattern's covered areas."""
    # A symbol wins a given line pattern at most once, however many lines it fills
    matched: Set[Symbol] = set()

    for area in pattern.covered_areas:
        for row, column in area:
            if row >= grid.rows or column >= grid.columns:
                raise ConfigurationError(
                    f"Win pattern '{pattern.name}' covers {row}:{column}, "
                    f"outside the {grid.rows}x{grid.columns} grid"
                )
        line = [grid.cell(row, column) for row, column in area]
        if not line:
            continue

        first = line[0]
        if first.is_bonus or first in matched:
            continue
        if all(symbol == first for symbol in line):
            record_match(matches, first, pattern)
            matched.add(first)


def evaluate_patterns(patterns: Sequence[WinPattern], grid: Grid) -> MatchRecord:
    """
    Evaluate all win patterns against a grid.

    Args:
        patterns: Configured win patterns
        grid: The generated grid

    Returns:
        MatchRecord mapping each winning symbol to its best pattern per group

    Raises:
        ConfigurationError: If a pattern is neither a count nor a line pattern
    """
    require(patterns, "patterns")
    require(grid, "grid")

    matches: MatchRecord = {}
    for pattern in patterns:
        if isinstance(pattern, CountPattern):
            match_count_pattern(pattern, grid, matches)
        elif isinstance(pattern, LinePattern):
            match_line_pattern(pattern, grid, matches)
        else:
            condition = getattr(pattern, "when", None)
            raise ConfigurationError(f"Unexpected win pattern condition: '{condition}'")

    return matches
