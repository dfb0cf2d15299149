"""
Board - The 3x3 grid of unit stacks.

Each cell is a LIFO stack (bottom -> top). Only the top unit of a cell is
visible for legality and win checks.
"""

from typing import Optional

from config import RULE_SETTINGS
from models.unit import Player, Size, Unit


class Board:
    """
    Fixed 3x3 grid of stacks.

    The board does not enforce game rules; it only stores units.
    Rule checks live in StackingRules and GameEngine.
    """

    SIZE = RULE_SETTINGS.board_size

    def __init__(self):
        self._cells: list[list[list[Unit]]] = [
            [[] for _ in range(self.SIZE)] for _ in range(self.SIZE)
        ]

    def clear(self) -> None:
        """Remove every unit from the board."""
        for row in self._cells:
            for stack in row:
                stack.clear()

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        """Check that (row, col) addresses a cell of the board."""
        if not (isinstance(row, int) and isinstance(col, int)):
            return False
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def top(self, row: int, col: int) -> Optional[Unit]:
        """Get the top unit of a cell, or None if the cell is empty."""
        stack = self._cells[row][col]
        if not stack:
            return None
        return stack[-1]

    def stack(self, row: int, col: int) -> tuple[Unit, ...]:
        """Get the full stack of a cell, bottom to top."""
        return tuple(self._cells[row][col])

    def push(self, row: int, col: int, unit: Unit) -> None:
        """Put a unit on top of a cell."""
        self._cells[row][col].append(unit)

    def pop(self, row: int, col: int) -> Unit:
        """
        Remove and return the top unit of a cell.

        Raises:
            IndexError: If the cell is empty
        """
        stack = self._cells[row][col]
        if not stack:
            raise IndexError(f"Cell ({row}, {col}) is empty")
        return stack.pop()

    def count(self, owner: Player, size: Size) -> int:
        """Count units of one owner and size anywhere on the board, covered or not."""
        target = Unit(owner, size)
        return sum(
            1
            for row in self._cells
            for stack in row
            for unit in stack
            if unit == target
        )

    def snapshot(self) -> tuple[tuple[tuple[Unit, ...], ...], ...]:
        """Immutable copy of the whole board."""
        return tuple(
            tuple(tuple(stack) for stack in row)
            for row in self._cells
        )

    def __repr__(self) -> str:
        units = sum(len(stack) for row in self._cells for stack in row)
        return f"<Board(units={units})>"
