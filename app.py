"""
Gobblet Application Controller

Top-level controller that wires the game engine to the event bus.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject

from config import init_config
from engine.gobblet import GameEngine, MoveResult
from models.schemas import MoveRequest
from services.event_bus import EventBus

logger = logging.getLogger(__name__)


class GobbletApp(QObject):
    """
    Top-level application controller.
    Owns one GameEngine and forwards its signals onto the EventBus.
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        super().__init__()

        # Core services
        self.event_bus = event_bus or EventBus()
        self.engine = GameEngine()

        # Forward engine signals to the bus
        self.engine.state_changed.connect(self.event_bus.state_changed)
        self.engine.game_reset.connect(self.event_bus.game_started)
        self.engine.move_applied.connect(self.event_bus.move_applied)
        self.engine.move_rejected.connect(self.event_bus.move_rejected)
        self.engine.turn_changed.connect(self.event_bus.turn_changed)
        self.engine.game_ended.connect(self.event_bus.game_ended)
        self.engine.snapshot_updated.connect(self.event_bus.snapshot_updated)

        self.engine.game_ended.connect(self._on_game_ended)
        self.event_bus.new_game_requested.connect(self.new_game)

    def new_game(self) -> None:
        """Reset the engine for a new game."""
        self.engine.reset()

    def submit_move(self, request: MoveRequest) -> Optional[MoveResult]:
        """
        Submit a validated move to the engine.

        Dropping a unit back onto the cell it was picked up from is not a
        move; it is filtered out here and never reaches the engine.

        Args:
            request: The validated move request

        Returns:
            The engine's MoveResult, or None if the move was not submitted
        """
        if request.is_noop:
            logger.debug("Unit returned to (%d, %d); nothing submitted",
                         request.row, request.col)
            return None

        result = self.engine.apply_move(*request.as_args())
        if result.ends_game:
            logger.info("Game over after %s", result.value)
        return result

    def _on_game_ended(self, result: dict) -> None:
        """Announce the winner on the bus."""
        self.event_bus.emit_message("info", f"Player {result['winner']} wins")


def create_app(event_bus: Optional[EventBus] = None) -> GobbletApp:
    """Set up directories and logging, then build the controller."""
    init_config()
    return GobbletApp(event_bus)
