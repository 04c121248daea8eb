from typing import List

from ..engine.models import RoundResult


def render_grid(matrix: List[List[str]]) -> str:
    """Render a matrix of symbol names as column-aligned, '|'-separated rows."""
    if not matrix:
        return ''

    widths = [max(len(row[c]) for row in matrix) for c in range(len(matrix[0]))]

    lines = []
    for row in matrix:
        cells = [name.ljust(widths[c]) for c, name in enumerate(row)]
        lines.append('| ' + ' | '.join(cells) + ' |')

    return '\n'.join(lines)


def render_result(result: RoundResult) -> str:
    """Render a round result: the grid followed by reward, wins and bonus symbols."""
    lines = [render_grid(result.matrix), '']
    lines.append(f"Reward: {result.reward:g}")

    if result.applied_winning_combinations:
        lines.append("Winning combinations:")
        for name, combinations in result.applied_winning_combinations.items():
            lines.append(f"  {name}: {', '.join(combinations)}")
    else:
        lines.append("Winning combinations: none")

    if result.applied_bonus_symbol:
        lines.append(f"Bonus symbols: {', '.join(result.applied_bonus_symbol)}")

    return '\n'.join(lines)
