"""
Rules Engine - Stacking and win rules for Gobblet.

Handles coordinate validation, the stacking comparison, and the
line scan used for win detection.
"""

from typing import Optional
from dataclasses import dataclass

from config import RULE_SETTINGS
from engine.board import Board
from engine.lines import LINES
from models.unit import Player, Unit


@dataclass(frozen=True)
class WinResult:
    """Result of a win scan that found a completed line."""
    winner: Player
    line_index: int


class StackingRules:
    """
    Stateless Gobblet rules.

    The GameEngine owns the state; these helpers only inspect a Board.
    """

    # ============ Validation Methods ============

    @staticmethod
    def validate_coordinates(row: int, col: int) -> bool:
        """Validate that (row, col) is on the board."""
        return Board.in_bounds(row, col)

    @staticmethod
    def validate_size(size: int) -> bool:
        """Validate that a size is Small, Medium or Large."""
        return isinstance(size, int) and 0 <= size < RULE_SETTINGS.size_count

    @staticmethod
    def validate_player(player: int) -> bool:
        return isinstance(player, int) and 0 <= player < RULE_SETTINGS.player_count

    @staticmethod
    def validate_source(source) -> bool:
        """Validate that a relocation source is a (row, col) pair on the board."""
        if not isinstance(source, (tuple, list)) or len(source) != 2:
            return False
        return Board.in_bounds(*source)

    @staticmethod
    def can_stack(top: Optional[Unit], size: int) -> bool:
        """
        Check whether a unit of `size` may be placed on a cell.

        Args:
            top: The cell's current top unit, or None if the cell is empty
            size: Size of the incoming unit

        Returns:
            True if the cell is empty or its top is strictly smaller
        """
        if top is None:
            return True
        return top.size < size

    # ============ Win Detection ============

    @staticmethod
    def find_win(board: Board) -> Optional[WinResult]:
        """
        Scan all lines for three same-owner top units.

        Lines are checked in LINES order and the first match wins.

        Returns:
            WinResult for the first completed line, or None
        """
        for line_index, (row, col, d_row, d_col) in enumerate(LINES):
            first = board.top(row, col)
            if first is None:
                continue

            owner = first.owner
            matched = 1
            while matched < RULE_SETTINGS.line_length:
                row += d_row
                col += d_col
                unit = board.top(row, col)
                if unit is None or unit.owner != owner:
                    break
                matched += 1

            if matched >= RULE_SETTINGS.line_length:
                return WinResult(winner=owner, line_index=line_index)

        return None

