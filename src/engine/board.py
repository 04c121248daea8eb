import random
from typing import Dict, List, Sequence

from .errors import BoardGenerationError, ConfigurationError, require
from .models import Grid, Symbol, WeightTable
from .sampler import sample


# Chance, in percent, that a cell is filled from the board-wide bonus table
BONUS_CELL_PERCENT = 10


def find_weight_table(
    weight_tables: Sequence[WeightTable],
    row: int,
    column: int,
    bonus: bool,
) -> WeightTable:
    """Return the weight table that applies to a cell of the given category."""
    for table in weight_tables:
        if table.matches(row, column, bonus):
            return table

    category = "bonus" if bonus else "standard"
    raise BoardGenerationError(
        f"No {category} weight table matched board cell with coordinates {row}:{column}"
    )


def generate_grid(
    symbols: Dict[str, Symbol],
    weight_tables: Sequence[WeightTable],
    rows: int,
    columns: int,
    rng: random.Random,
) -> Grid:
    """
    Fill a new grid cell by cell in row-major order.

    Each cell consumes two draws from ``rng``: an integer in [1, 100] deciding
    whether the cell is a bonus cell, then one sampling draw from the matching
    weight table. A round therefore always uses ``2 * rows * columns`` draws
    in a fixed order, which keeps seeded rounds reproducible.

    Args:
        symbols: Symbol catalog keyed by name
        weight_tables: Cell-scoped tables plus the board-wide bonus table
        rows: Number of grid rows
        columns: Number of grid columns
        rng: Random source

    Returns:
        The generated Grid

    Raises:
        BoardGenerationError: If a cell has no matching table or the grid is empty
        ConfigurationError: If a table references a symbol missing from the catalog
    """
    require(symbols, "symbols")
    require(weight_tables, "weight_tables")
    require(rng, "rng")

    cells: List[List[Symbol]] = []
    for row in range(rows):
        cells.append([])
        for column in range(columns):
            bonus = rng.randint(1, 100) <= BONUS_CELL_PERCENT
            table = find_weight_table(weight_tables, row, column, bonus)
            name = sample(table.weights, rng)
            if name not in symbols:
                raise ConfigurationError(
                    f"Weight table for cell {row}:{column} references unknown symbol '{name}'"
                )
            cells[row].append(symbols[name])

    if not cells or not cells[0]:
        raise BoardGenerationError("Board matrix dimensions must be positive")

    return Grid(cells=cells)
