"""GameController: the central orchestrator of a hot-seat game.

Coordinates: MatchState, the rules engine, the optional king-safety check.
Emits events via simple callbacks so a front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from hotseat.core.applier import PROMOTION_CHOICES
from hotseat.core.enums import Color, PieceType
from hotseat.core.rules import get_valid_moves, is_valid_move
from hotseat.core.safety import would_expose_king
from hotseat.core.state import GameState
from hotseat.core.types import Position
from hotseat.game.config import GameConfig
from hotseat.game.interfaces import GameEndReason, GamePhase
from hotseat.game.state import MatchState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, MatchState], None]
PromotionCallback = Callable[[Position], None]
GameOverCallback = Callable[[Color, GameEndReason], None]  # winner, reason
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event.

    A promotion chosen by the player fires ``on_move`` twice: once when the
    pawn lands and again with the record carrying ``promoted_to``. With
    ``auto_promote_to`` only the final record is emitted.
    """

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_required: list[PromotionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs a two-player game on one screen: validates moves, switches turns,
    tracks history and captures, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread;
    front ends must submit one move at a time.
    """

    __slots__ = ("_state", "_config", "events")

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._state = MatchState(self._config)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def position(self) -> GameState:
        return self._state.position

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self, config: GameConfig | None = None, position: GameState | None = None
    ) -> None:
        if config is not None:
            self._config = config
        self._state = MatchState(self._config)
        self._state.setup(position)
        _LOGGER.info("New game started (%s)", self._config)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def valid_targets(self, from_pos: Position) -> list[Position]:
        """Squares the piece on *from_pos* may move to right now."""
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return []
        position = self._state.position
        targets = get_valid_moves(position, from_pos)
        if self._config.enforce_king_safety:
            targets = [t for t in targets if not would_expose_king(position, from_pos, t)]
        return targets

    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.debug(
                "Move %s%s ignored in phase %s",
                from_pos,
                to_pos,
                self._state.phase.name,
            )
            return False

        position = self._state.position
        if not is_valid_move(position, from_pos, to_pos):
            _LOGGER.debug("Rejected illegal move %s%s", from_pos, to_pos)
            return False
        if self._config.enforce_king_safety and would_expose_king(position, from_pos, to_pos):
            _LOGGER.debug("Rejected move %s%s: king left in check", from_pos, to_pos)
            return False

        # Apply
        record = self._state.apply_move(from_pos, to_pos)
        _LOGGER.debug("Played %s", record.text)

        if self._state.phase == GamePhase.AWAITING_PROMOTION:
            if self._config.auto_promote_to is not None:
                # Listeners only see the finished promotion
                self._resolve_promotion(self._config.auto_promote_to)
            else:
                self._emit_move(record)
                _LOGGER.info("Promotion pending on %s", to_pos)
                self._emit_phase(GamePhase.AWAITING_PROMOTION)
                for cb in self.events.on_promotion_required:
                    cb(to_pos)
            return True

        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over()
            return True

        self._emit_phase(GamePhase.AWAITING_MOVE)
        return True

    def choose_promotion(self, piece_type: PieceType) -> bool:
        """Resolve a pending promotion; ``False`` if none is pending."""
        if self._state.phase != GamePhase.AWAITING_PROMOTION:
            return False
        if piece_type not in PROMOTION_CHOICES:
            return False
        self._resolve_promotion(piece_type)
        return True

    def resign(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(color)
        self._emit_game_over()

    def undo_move(self) -> bool:
        """Take back the last move or resignation; ``False`` if there is none."""
        if not self._state.can_undo:
            return False
        undone = self._state.undo_last_move()
        _LOGGER.debug("Took back %s", undone if undone is not None else "resignation")
        self._emit_phase(self._state.phase)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve_promotion(self, piece_type: PieceType) -> None:
        record = self._state.resolve_promotion(piece_type)
        _LOGGER.info("Promoted: %s", record.text)
        self._emit_move(record)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        winner = self._state.winner
        reason = self._state.end_reason
        if winner is None or reason is None:
            return
        _LOGGER.info("Game over: %s wins (%s)", winner, reason.name.lower())
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner, reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
