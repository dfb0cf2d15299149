"""
Reserve Pool - Free units each player has not yet placed.

Counts start at the fixed allotment and only ever go down: a unit that
leaves the reserve stays in play until the game is reset.
"""

from dataclasses import dataclass, field

from config import RULE_SETTINGS
from models.unit import Player, Size


def _full_counts() -> list[list[int]]:
    return [
        [RULE_SETTINGS.units_per_size] * RULE_SETTINGS.size_count
        for _ in range(RULE_SETTINGS.player_count)
    ]


@dataclass
class ReservePool:
    """
    Per player, per size count of units not yet placed on the board.

    Attributes:
        counts: counts[player][size]
    """
    counts: list[list[int]] = field(default_factory=_full_counts)

    def reset(self) -> None:
        """Refill the reserve for a new game."""
        self.counts = _full_counts()

    def count(self, player: Player, size: Size) -> int:
        """Number of free units of this size the player still holds."""
        return self.counts[player][size]

    def has(self, player: Player, size: Size) -> bool:
        return self.counts[player][size] > 0

    def has_any(self, player: Player) -> bool:
        """Whether the player holds any free unit at all."""
        return any(c > 0 for c in self.counts[player])

    def take(self, player: Player, size: Size) -> None:
        """
        Take one unit out of the reserve.

        Raises:
            ValueError: If the player has no free unit of that size
        """
        if self.counts[player][size] <= 0:
            raise ValueError(
                f"Player {int(player)} has no free {Size(size).name.lower()} unit"
            )
        self.counts[player][size] -= 1

    def snapshot(self) -> tuple[tuple[int, ...], ...]:
        """Immutable copy of all counts."""
        return tuple(tuple(row) for row in self.counts)
