"""
Game Engine - Core rules and state for Gobblet.

The GameEngine runs independently of any GUI and owns the whole game
state: board, reserve, turn and result. Presentation layers query it,
submit moves through apply_move, and may listen to its Qt signals.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from engine.board import Board
from engine.lines import line_cells
from engine.reserve import ReservePool
from engine.rules import StackingRules, WinResult
from models.unit import Player, Size, Unit

logger = logging.getLogger(__name__)


Source = Optional[tuple[int, int]]


class GamePhase(Enum):
    """State machine states for the game lifecycle."""
    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class MoveResult(Enum):
    """Outcome of GameEngine.apply_move."""
    REJECTED = "rejected"
    APPLIED = "applied"
    WIN_CONFIRMED = "win_confirmed"
    WINS_FOR_OPPONENT = "wins_for_opponent"

    @property
    def ends_game(self) -> bool:
        return self in (MoveResult.WIN_CONFIRMED, MoveResult.WINS_FOR_OPPONENT)


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable snapshot of the game state.
    Emitted after every state change for GUI updates.
    """
    board: tuple[tuple[tuple[Unit, ...], ...], ...]
    reserve: tuple[tuple[int, ...], ...]
    turn: Player
    phase: GamePhase
    ended: bool
    winner: Optional[Player] = None
    winning_line: Optional[int] = None
    lifted_unit: Optional[Unit] = None


class GameEngine(QObject):
    """
    Gobblet rules engine.
    Emits Qt Signals so GUI layers can react without polling.

    Illegal moves never raise: can_place returns False and apply_move
    returns MoveResult.REJECTED, leaving the state untouched.
    """

    # Signals
    state_changed = Signal(str)         # new phase name
    game_reset = Signal()
    move_applied = Signal(object)       # move details + result
    move_rejected = Signal(object)      # move details + reason
    turn_changed = Signal(int)          # player whose turn it is now
    game_ended = Signal(object)         # winner, line, cells
    snapshot_updated = Signal(object)   # GameSnapshot

    def __init__(self):
        super().__init__()
        self._board = Board()
        self._reserve = ReservePool()
        self._phase = GamePhase.IN_PROGRESS
        self._reset_state()

    def _reset_state(self) -> None:
        """Reset all game state to initial values."""
        self._board.clear()
        self._reserve.reset()
        self._turn: Player = Player.FIRST
        self._ended: bool = False
        self._winner: Optional[Player] = None
        self._winning_line: Optional[int] = None

        # Unit lifted off the board by a move that exposed an opponent win
        self._lifted_unit: Optional[Unit] = None

    @property
    def phase(self) -> GamePhase:
        """Current phase of the game."""
        return self._phase

    @phase.setter
    def phase(self, new_phase: GamePhase) -> None:
        """Set the phase and emit signal."""
        self._phase = new_phase
        self.state_changed.emit(new_phase.value)

    def reset(self) -> None:
        """Start a fresh game: empty board, full reserve, player 0 to move."""
        self._reset_state()
        self.phase = GamePhase.IN_PROGRESS
        logger.info("Game reset")
        self.game_reset.emit()
        self.turn_changed.emit(int(self._turn))
        self._emit_snapshot()

    # ============ Queries ============

    def is_ended(self) -> bool:
        return self._ended

    def turn_player(self) -> Player:
        return self._turn

    def winner(self) -> Optional[Player]:
        return self._winner

    def winning_line(self) -> Optional[int]:
        """Index into LINES of the completed line, or None."""
        return self._winning_line

    def winning_cells(self) -> Optional[tuple[tuple[int, int], ...]]:
        """The three (row, col) cells of the winning line, or None."""
        if self._winning_line is None:
            return None
        return line_cells(self._winning_line)

    def lifted_unit(self) -> Optional[Unit]:
        """
        The unit picked up by a move that returned WINS_FOR_OPPONENT.

        That unit was removed from its source cell but never placed,
        so it is neither on the board nor in the reserve.
        """
        return self._lifted_unit

    def cell_top_unit(self, row: int, col: int) -> Optional[Unit]:
        """Get the visible unit of a cell, or None if empty or off the board."""
        if not StackingRules.validate_coordinates(row, col):
            return None
        return self._board.top(row, col)

    def cell_stack(self, row: int, col: int) -> tuple[Unit, ...]:
        """Get every unit of a cell, bottom to top."""
        if not StackingRules.validate_coordinates(row, col):
            return ()
        return self._board.stack(row, col)

    def reserve_count(self, player: int, size: int) -> int:
        """Free units of this size the player has not placed yet."""
        if not (StackingRules.validate_player(player) and StackingRules.validate_size(size)):
            return 0
        return self._reserve.count(player, size)

    def reserve(self) -> tuple[tuple[int, ...], ...]:
        """All reserve counts as reserve()[player][size]."""
        return self._reserve.snapshot()

    def can_pick_up(self, player: int, source: Source = None) -> bool:
        """
        Check whether a player may pick up a unit at all.

        Args:
            player: The player trying to pick up a unit
            source: None for the reserve, or (row, col) of a board cell

        Returns:
            True if it's the player's turn and there is a unit of theirs
            to take from `source`
        """
        if self._ended or not StackingRules.validate_player(player):
            return False
        if player != self._turn:
            return False
        if source is None:
            return self._reserve.has_any(player)

        if not StackingRules.validate_source(source):
            return False
        src_row, src_col = source
        top = self._board.top(src_row, src_col)
        return top is not None and top.owner == player

    def can_place(self, player: int, row: int, col: int, size: int,
                  source: Source = None) -> bool:
        """
        Check whether a move is legal. Has no side effects.

        Args:
            player: The player making the move
            row: Destination row (0-2)
            col: Destination column (0-2)
            size: Size of the unit (0-2)
            source: None for a unit from the reserve, or (row, col) of the
                    board cell the unit is moved from

        Returns:
            True if apply_move would accept the move
        """
        return self._illegal_reason(player, row, col, size, source) is None

    def snapshot(self) -> GameSnapshot:
        """Build an immutable snapshot of the current state."""
        return GameSnapshot(
            board=self._board.snapshot(),
            reserve=self._reserve.snapshot(),
            turn=self._turn,
            phase=self._phase,
            ended=self._ended,
            winner=self._winner,
            winning_line=self._winning_line,
            lifted_unit=self._lifted_unit,
        )

    # ============ Mutation ============

    def apply_move(self, player: int, row: int, col: int, size: int,
                   source: Source = None) -> MoveResult:
        """
        Validate and apply a move.

        The board is scanned for a win twice: once right after a relocated
        unit is lifted off its source cell, and once after the unit lands.
        If lifting the unit uncovers a completed line, the game ends at
        that point and the unit is never placed.

        Args:
            player: The player making the move
            row: Destination row (0-2)
            col: Destination column (0-2)
            size: Size of the unit (0-2)
            source: None for a unit from the reserve, or (row, col) of the
                    board cell the unit is moved from

        Returns:
            The MoveResult. REJECTED leaves the state unchanged.
        """
        reason = self._illegal_reason(player, row, col, size, source)
        if reason is not None:
            return self._reject(player, row, col, size, source, reason)

        player = Player(player)
        size = Size(size)

        if source is not None:
            src_row, src_col = source
            if self._board.top(src_row, src_col) != Unit(player, size):
                return self._reject(player, row, col, size, source,
                                    "source unit does not match")
            lifted = self._board.pop(src_row, src_col)

            exposed = StackingRules.find_win(self._board)
            if exposed is not None:
                self._lifted_unit = lifted
                logger.info(
                    "Player %d lifted %r from (%d, %d) and exposed a win for player %d",
                    player, lifted, src_row, src_col, exposed.winner,
                )
                return self._finish_move(player, row, col, size, source,
                                         MoveResult.WINS_FOR_OPPONENT, exposed)

        self._board.push(row, col, Unit(player, size))
        if source is None:
            self._reserve.take(player, size)

        self._turn = player.opponent()

        win = StackingRules.find_win(self._board)
        if win is not None:
            return self._finish_move(player, row, col, size, source,
                                     MoveResult.WIN_CONFIRMED, win)

        self.turn_changed.emit(int(self._turn))
        return self._finish_move(player, row, col, size, source, MoveResult.APPLIED)

    # ============ Internals ============

    def _illegal_reason(self, player: int, row: int, col: int, size: int,
                        source: Source) -> Optional[str]:
        """Return why a move is illegal, or None if it is legal."""
        if self._ended:
            return "game is over"
        if not StackingRules.validate_player(player):
            return f"unknown player {player}"
        if not StackingRules.validate_coordinates(row, col):
            return f"destination ({row}, {col}) is off the board"
        if not StackingRules.validate_size(size):
            return f"unknown size {size}"
        if player != self._turn:
            return f"not player {player}'s turn"

        if source is None:
            if not self._reserve.has(player, size):
                return "no free unit of that size"
        else:
            if not StackingRules.validate_source(source):
                return f"malformed source {source!r}"
            src_row, src_col = source
            if self._board.top(src_row, src_col) != Unit(player, size):
                return "source unit does not match"

        if not StackingRules.can_stack(self._board.top(row, col), size):
            return "destination is not smaller"

        return None

    def _reject(self, player, row, col, size, source, reason: str) -> MoveResult:
        logger.debug(
            "Rejected move by player %s to (%s, %s) size %s from %s: %s",
            player, row, col, size, source if source is not None else "reserve", reason,
        )
        details = self._move_details(player, row, col, size, source)
        details["reason"] = reason
        self.move_rejected.emit(details)
        return MoveResult.REJECTED

    def _finish_move(self, player: Player, row: int, col: int, size: Size,
                     source: Source, result: MoveResult,
                     win: Optional[WinResult] = None) -> MoveResult:
        if win is not None:
            self._end_game(win)

        logger.debug(
            "Player %d moved %s to (%d, %d) from %s: %s",
            player, size.label, row, col,
            source if source is not None else "reserve", result.value,
        )
        details = self._move_details(player, row, col, size, source)
        details["result"] = result.value
        self.move_applied.emit(details)

        if win is not None:
            self.game_ended.emit({
                "winner": int(self._winner),
                "line": self._winning_line,
                "cells": self.winning_cells(),
                "result": result.value,
            })

        self._emit_snapshot()
        return result

    def _end_game(self, win: WinResult) -> None:
        """Freeze the game with the given winner."""
        self._ended = True
        self._winner = win.winner
        self._winning_line = win.line_index
        self.phase = GamePhase.ENDED
        logger.info("Player %d wins on line %d", win.winner, win.line_index)

    @staticmethod
    def _move_details(player, row, col, size, source) -> dict:
        return {
            "player": int(player) if isinstance(player, int) else player,
            "row": row,
            "col": col,
            "size": int(size) if isinstance(size, int) else size,
            "source": source,
        }

    def _emit_snapshot(self) -> None:
        self.snapshot_updated.emit(self.snapshot())
