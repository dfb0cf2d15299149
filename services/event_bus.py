"""
Event Bus - Central signal hub for inter-module communication.

All modules connect to this single object rather than directly to each other,
enabling loose coupling between the game engine and whatever presentation
layer drives it.
"""

from PySide6.QtCore import QObject, Signal


class EventBus(QObject):
    """
    Central signal hub for Gobblet.

    The EventBus acts as a mediator between application components:
    - GameEngine emits move and result events (forwarded by GobbletApp)
    - Presentation layers listen and redraw the board
    - Presentation layers request a new game

    Usage:
        # In GobbletApp
        engine.move_applied.connect(self.event_bus.move_applied)

        # In a board view
        self.event_bus.snapshot_updated.connect(self._on_snapshot)
    """

    # ============ Game Lifecycle ============
    game_started = Signal()             # fresh board, player 0 to move
    game_ended = Signal(object)         # {winner, line, cells, result}
    state_changed = Signal(str)         # phase name

    # ============ Move Events ============
    move_applied = Signal(object)       # {player, row, col, size, source, result}
    move_rejected = Signal(object)      # {player, row, col, size, source, reason}
    turn_changed = Signal(int)          # player to move
    snapshot_updated = Signal(object)   # GameSnapshot

    # ============ Requests ============
    new_game_requested = Signal()

    # ============ System Events ============
    system_message = Signal(str, str)   # (level, message) - e.g., ("info", "Player 1 wins")

    def __init__(self):
        super().__init__()

    def emit_message(self, level: str, message: str) -> None:
        """Emit a system message (info, warning, error)."""
        self.system_message.emit(level, message)
