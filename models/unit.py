"""
Unit models for the Gobblet board.

A unit is nothing more than an (owner, size) pair; two units with the
same owner and size are interchangeable.
"""

import enum
from dataclasses import dataclass


class Player(enum.IntEnum):
    """The two players. Player FIRST always opens the game."""
    FIRST = 0
    SECOND = 1

    def opponent(self) -> "Player":
        """Get the other player."""
        return Player.SECOND if self == Player.FIRST else Player.FIRST


class Size(enum.IntEnum):
    """Unit sizes. A unit may only cover strictly smaller units."""
    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def label(self) -> str:
        """Single-letter label (S, M, L)."""
        return self.name[0]


@dataclass(frozen=True)
class Unit:
    """A single game unit."""
    owner: Player
    size: Size

    def __post_init__(self):
        # Accept plain ints from callers
        object.__setattr__(self, "owner", Player(self.owner))
        object.__setattr__(self, "size", Size(self.size))

    def __repr__(self) -> str:
        return f"<Unit(owner={int(self.owner)}, size={self.size.label})>"
