"""
Winning lines of the 3x3 board.

Each entry is (start_row, start_col, d_row, d_col). The index of an entry
is the line index reported by GameEngine.winning_line().
"""

from config import RULE_SETTINGS


# Rows top to bottom, columns left to right, then the two diagonals
LINES: tuple[tuple[int, int, int, int], ...] = (
    (0, 0, 0, 1),
    (1, 0, 0, 1),
    (2, 0, 0, 1),
    (0, 0, 1, 0),
    (0, 1, 1, 0),
    (0, 2, 1, 0),
    (0, 0, 1, 1),
    (2, 0, -1, 1),
)


def line_cells(line_index: int) -> tuple[tuple[int, int], ...]:
    """
    Get the cells a line passes through, in walking order.

    Args:
        line_index: Index into LINES (0-7)

    Returns:
        Tuple of (row, col) pairs
    """
    row, col, d_row, d_col = LINES[line_index]
    cells = []
    for _ in range(RULE_SETTINGS.line_length):
        cells.append((row, col))
        row += d_row
        col += d_col
    return tuple(cells)
