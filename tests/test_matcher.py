"""Test win pattern matching."""

from unittest.mock import Mock

import pytest

from src.engine import ConfigurationError, CountPattern, LinePattern, evaluate_patterns


def count_pattern(name, count, multiplier=1.0):
    return CountPattern(name=name, reward_multiplier=multiplier, group="same_symbols", count=count)


def rows_pattern(name="rows", multiplier=2.0):
    return LinePattern(
        name=name,
        reward_multiplier=multiplier,
        group="horizontally_linear_symbols",
        covered_areas=[[(r, 0), (r, 1), (r, 2)] for r in range(3)],
    )


class TestCountPatterns:
    """Test same-symbol count patterns."""

    def test_count_boundary(self, grid_of, symbols):
        """Exactly ``count`` occurrences match, one fewer does not."""
        grid = grid_of([["A", "A", "B"], ["C", "A", "B"], ["D", "E", "F"]])
        matches = evaluate_patterns([count_pattern("three", 3)], grid)

        assert list(matches) == [symbols["A"]]
        assert matches[symbols["A"]]["same_symbols"].name == "three"

    def test_every_qualifying_symbol_matches(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["B", "B", "B"], ["C", "D", "E"]])
        matches = evaluate_patterns([count_pattern("three", 3)], grid)

        assert set(matches) == {symbols["A"], symbols["B"]}

    def test_bonus_symbols_never_counted(self, grid_of):
        grid = grid_of([["10x", "10x", "10x"], ["MISS", "MISS", "MISS"], ["A", "B", "C"]])
        matches = evaluate_patterns([count_pattern("three", 3)], grid)

        assert matches == {}

    def test_best_pattern_in_group_kept(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["A", "A", "B"], ["C", "D", "E"]])
        patterns = [count_pattern("three", 3, 1), count_pattern("four", 4, 1.5), count_pattern("five", 5, 2)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "five"

    def test_lower_multiplier_does_not_replace(self, grid_of, symbols):
        """Registration order does not matter when multipliers differ."""
        grid = grid_of([["A", "A", "A"], ["A", "A", "B"], ["C", "D", "E"]])
        patterns = [count_pattern("five", 5, 2), count_pattern("three", 3, 1)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "five"

    def test_equal_multiplier_keeps_first_registered(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["B", "C", "D"], ["E", "F", "B"]])
        patterns = [count_pattern("first", 3, 1), count_pattern("second", 2, 1)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "first"


class TestLinePatterns:
    """Test linear covered-area patterns."""

    def test_full_line_matches(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["B", "C", "D"], ["E", "F", "B"]])
        matches = evaluate_patterns([rows_pattern()], grid)

        assert matches == {symbols["A"]: {"horizontally_linear_symbols": rows_pattern()}}

    def test_broken_line_does_not_match(self, grid_of):
        grid = grid_of([["A", "A", "B"], ["B", "C", "D"], ["E", "F", "B"]])

        assert evaluate_patterns([rows_pattern()], grid) == {}

    def test_bonus_line_does_not_match(self, grid_of):
        grid = grid_of([["10x", "10x", "10x"], ["B", "C", "D"], ["E", "F", "B"]])

        assert evaluate_patterns([rows_pattern()], grid) == {}

    def test_symbol_recorded_once_per_pattern(self, grid_of, symbols):
        """Filling two rows still records a single win for the pattern."""
        grid = grid_of([["A", "A", "A"], ["A", "A", "A"], ["E", "F", "B"]])
        matches = evaluate_patterns([rows_pattern()], grid)

        assert len(matches[symbols["A"]]) == 1

    def test_different_symbols_on_different_lines(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["B", "B", "B"], ["E", "F", "B"]])
        matches = evaluate_patterns([rows_pattern()], grid)

        assert set(matches) == {symbols["A"], symbols["B"]}

    def test_groups_are_kept_separately(self, grid_of, symbols):
        grid = grid_of([["A", "A", "A"], ["B", "C", "D"], ["E", "F", "B"]])
        matches = evaluate_patterns([count_pattern("three", 3), rows_pattern()], grid)

        assert set(matches[symbols["A"]]) == {"same_symbols", "horizontally_linear_symbols"}

    def test_coordinates_outside_grid(self, grid_of):
        pattern = LinePattern(
            name="too_far",
            reward_multiplier=2,
            group="vertically_linear_symbols",
            covered_areas=[[(0, 0), (3, 0)]],
        )
        grid = grid_of([["A", "A", "A"], ["B", "C", "D"], ["E", "F", "B"]])

        with pytest.raises(ConfigurationError, match="too_far"):
            evaluate_patterns([pattern], grid)


class TestMixedPatternGroups:
    """Test keep-best merging across count and line patterns sharing a group."""

    @pytest.fixture
    def grid(self, grid_of):
        # A fills the top row and appears three times
        return grid_of([["A", "A", "A"], ["B", "C", "D"], ["E", "F", "B"]])

    def line_in_count_group(self, multiplier):
        return LinePattern(
            name="top_row",
            reward_multiplier=multiplier,
            group="same_symbols",
            covered_areas=[[(0, 0), (0, 1), (0, 2)]],
        )

    def test_equal_multiplier_line_first(self, grid, symbols):
        patterns = [self.line_in_count_group(1), count_pattern("three", 3, 1)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "top_row"

    def test_equal_multiplier_count_first(self, grid, symbols):
        patterns = [count_pattern("three", 3, 1), self.line_in_count_group(1)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "three"

    def test_later_higher_multiplier_replaces(self, grid, symbols):
        patterns = [count_pattern("three", 3, 1), self.line_in_count_group(3)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "top_row"

    def test_later_higher_count_replaces_line(self, grid, symbols):
        patterns = [self.line_in_count_group(1), count_pattern("three", 3, 2)]
        matches = evaluate_patterns(patterns, grid)

        assert matches[symbols["A"]]["same_symbols"].name == "three"


class TestEvaluatePatterns:
    """Test dispatch and repeatability."""

    def test_unknown_pattern_variant(self, grid_of):
        grid = grid_of([["A"]])

        with pytest.raises(ConfigurationError, match="teleport"):
            evaluate_patterns([Mock(when="teleport")], grid)

    def test_repeated_evaluation_is_identical(self, config, grid_of):
        grid = grid_of([["A", "A", "B"], ["A", "+1000", "B"], ["A", "A", "B"]])

        assert evaluate_patterns(config.patterns, grid) == evaluate_patterns(config.patterns, grid)

    def test_no_patterns_match_empty_record(self, config, grid_of):
        grid = grid_of([["A", "B", "C"], ["D", "E", "F"], ["10x", "MISS", "+500"]])

        assert evaluate_patterns(config.patterns, grid) == {}
