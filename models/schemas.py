"""
Pydantic schemas for data validation.

Raw input from a presentation layer (drag-and-drop, network, tests) is
validated here before it reaches the GameEngine.
"""

import enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from config import RULE_SETTINGS
from models.unit import Player, Size


BOARD_MAX_INDEX = RULE_SETTINGS.board_size - 1
PLAYER_MAX_INDEX = RULE_SETTINGS.player_count - 1
SIZE_MAX_INDEX = RULE_SETTINGS.size_count - 1


# ============ Move Schemas ============

class MoveRequest(BaseModel):
    """
    Schema for a move request.

    `source` is None for a placement from the reserve, or the (row, col)
    of the board cell the unit is taken from.
    """
    player: int = Field(..., ge=0, le=PLAYER_MAX_INDEX)
    row: int = Field(..., ge=0, le=BOARD_MAX_INDEX)
    col: int = Field(..., ge=0, le=BOARD_MAX_INDEX)
    size: int = Field(..., ge=0, le=SIZE_MAX_INDEX)
    source: Optional[tuple[int, int]] = None

    @field_validator("source")
    @classmethod
    def source_on_board(cls, v: Optional[tuple[int, int]]) -> Optional[tuple[int, int]]:
        if v is None:
            return v
        src_row, src_col = v
        if not (0 <= src_row <= BOARD_MAX_INDEX and 0 <= src_col <= BOARD_MAX_INDEX):
            raise ValueError(f"Source ({src_row}, {src_col}) is off the board")
        return v

    @property
    def is_relocation(self) -> bool:
        """Whether the unit is moved from another board cell."""
        return self.source is not None

    @property
    def is_noop(self) -> bool:
        """Whether the unit is dropped back onto the cell it came from."""
        return self.source is not None and self.source == (self.row, self.col)

    def as_args(self) -> tuple:
        """Positional arguments for GameEngine.can_place / apply_move."""
        return (Player(self.player), self.row, self.col, Size(self.size), self.source)


# ============ Snapshot Schemas ============

class UnitSchema(BaseModel):
    """Schema for a single unit."""
    owner: int
    size: int

    class Config:
        from_attributes = True


class GameSnapshotSchema(BaseModel):
    """
    Serializable view of a GameSnapshot.
    Used when a presentation layer needs plain data instead of engine types.
    """
    board: list[list[list[UnitSchema]]]
    reserve: list[list[int]]
    turn: int
    phase: str
    ended: bool
    winner: Optional[int] = None
    winning_line: Optional[int] = None
    lifted_unit: Optional[UnitSchema] = None

    class Config:
        from_attributes = True

    @field_validator("phase", mode="before")
    @classmethod
    def phase_value(cls, v):
        if isinstance(v, enum.Enum):
            return v.value
        return v
