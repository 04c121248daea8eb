"""Test board generation."""

import random
from unittest.mock import Mock

import pytest

from src.engine import (
    BoardGenerationError,
    BonusWeights,
    CellWeights,
    ConfigurationError,
    InputContractError,
    generate_grid,
)
from src.engine.board import find_weight_table


def scripted_rng(category_draws, sampling_draws) -> Mock:
    """A random source with scripted randint() and random() results."""
    rng = Mock()
    rng.randint.side_effect = list(category_draws)
    rng.random.side_effect = list(sampling_draws)
    return rng


@pytest.fixture
def tables():
    """A 1x2 board: A at 0:0, B at 0:1, 10x on bonus cells."""
    return [
        CellWeights(row=0, column=0, weights={"A": 1}),
        CellWeights(row=0, column=1, weights={"B": 1}),
        BonusWeights(weights={"10x": 1}),
    ]


class TestGenerateGrid:
    """Test cell filling and category draws."""

    def test_standard_cells_use_their_own_table(self, symbols, tables):
        rng = scripted_rng([50, 50], [0.5, 0.5])
        grid = generate_grid(symbols, tables, 1, 2, rng)

        assert grid.names() == [["A", "B"]]

    def test_category_draw_at_threshold_is_bonus(self, symbols, tables):
        """A category draw of 10 or less fills the cell from the bonus table."""
        rng = scripted_rng([10, 11], [0.5, 0.5])
        grid = generate_grid(symbols, tables, 1, 2, rng)

        assert grid.names() == [["10x", "B"]]

    def test_two_draws_per_cell(self, symbols):
        tables = [CellWeights(row=r, column=c, weights={"A": 1}) for r in range(2) for c in range(3)]
        tables.append(BonusWeights(weights={"MISS": 1}))
        rng = scripted_rng([99] * 6, [0.5] * 6)

        generate_grid(symbols, tables, 2, 3, rng)

        assert rng.randint.call_count == 6
        assert rng.random.call_count == 6
        rng.randint.assert_called_with(1, 100)

    def test_cells_filled_in_row_major_order(self, symbols):
        tables = [
            CellWeights(row=0, column=0, weights={"A": 1, "B": 1}),
            CellWeights(row=1, column=0, weights={"A": 1, "B": 1}),
            BonusWeights(weights={"MISS": 1}),
        ]
        # 0.9 draws 10 (A), 0.1 draws 90 (B)
        rng = scripted_rng([50, 50], [0.9, 0.1])
        grid = generate_grid(symbols, tables, 2, 1, rng)

        assert grid.names() == [["A"], ["B"]]

    def test_seeded_generation_is_reproducible(self, config):
        first = generate_grid(config.symbols, config.weight_tables, 3, 3, random.Random(7))
        second = generate_grid(config.symbols, config.weight_tables, 3, 3, random.Random(7))

        assert first.names() == second.names()

    def test_every_cell_populated_from_catalog(self, config):
        rng = random.Random(1)
        for _ in range(50):
            grid = generate_grid(config.symbols, config.weight_tables, 3, 3, rng)
            assert grid.rows == 3
            assert grid.columns == 3
            assert all(name in config.symbols for row in grid.names() for name in row)


class TestGenerateGridErrors:
    """Test generation failures."""

    def test_missing_cell_table(self, symbols):
        tables = [CellWeights(row=0, column=0, weights={"A": 1}), BonusWeights(weights={"10x": 1})]
        rng = scripted_rng([50, 50], [0.5, 0.5])

        with pytest.raises(BoardGenerationError, match="0:1"):
            generate_grid(symbols, tables, 1, 2, rng)

    def test_missing_bonus_table(self, symbols):
        tables = [CellWeights(row=0, column=0, weights={"A": 1})]
        rng = scripted_rng([5], [0.5])

        with pytest.raises(BoardGenerationError, match="bonus"):
            generate_grid(symbols, tables, 1, 1, rng)

    def test_unknown_symbol_in_table(self, symbols):
        tables = [CellWeights(row=0, column=0, weights={"Q": 1}), BonusWeights(weights={"10x": 1})]
        rng = scripted_rng([50], [0.5])

        with pytest.raises(ConfigurationError, match="'Q'"):
            generate_grid(symbols, tables, 1, 1, rng)

    def test_empty_board(self, symbols, tables):
        with pytest.raises(BoardGenerationError, match="positive"):
            generate_grid(symbols, tables, 0, 2, random.Random(1))

    def test_missing_random_source(self, symbols, tables):
        with pytest.raises(InputContractError):
            generate_grid(symbols, tables, 1, 2, None)


class TestFindWeightTable:
    """Test weight table lookup."""

    def test_first_matching_table_wins(self):
        first = CellWeights(row=0, column=0, weights={"A": 1})
        second = CellWeights(row=0, column=0, weights={"B": 1})

        assert find_weight_table([first, second], 0, 0, False) is first

    def test_bonus_table_applies_everywhere(self, tables):
        assert find_weight_table(tables, 5, 9, True) is tables[2]

    def test_cell_table_not_used_for_bonus_cell(self):
        tables = [CellWeights(row=0, column=0, weights={"A": 1})]

        with pytest.raises(BoardGenerationError):
            find_weight_table(tables, 0, 0, True)
