"""
Gobblet Models

Value types and validation schemas shared by the engine and its callers.
"""

from models.unit import Player, Size, Unit
from models.schemas import MoveRequest, UnitSchema, GameSnapshotSchema

__all__ = [
    "Player",
    "Size",
    "Unit",
    "MoveRequest",
    "UnitSchema",
    "GameSnapshotSchema",
]
