"""Match state: turn taking, history, captures and the win condition."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from hotseat.core.applier import PROMOTION_CHOICES, apply_move, promote_pawn, record_move
from hotseat.core.enums import Color, PieceType
from hotseat.core.move import Move
from hotseat.core.notation import move_to_text
from hotseat.core.piece import Piece
from hotseat.core.state import GameState
from hotseat.core.types import Position
from hotseat.game.config import GameConfig
from hotseat.game.interfaces import GameEndReason, GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    text: str

    @classmethod
    def from_move(cls, move: Move) -> MoveRecord:
        return cls(move=move, text=move_to_text(move))


@dataclass
class CapturedPieces:
    """Pieces taken off the board, grouped by the color that lost them."""

    white: list[Piece] = field(default_factory=list)
    black: list[Piece] = field(default_factory=list)

    def add(self, piece: Piece) -> None:
        self.of(piece.color).append(piece)

    def of(self, color: Color) -> list[Piece]:
        return self.white if color == Color.WHITE else self.black

    def copy(self) -> CapturedPieces:
        return CapturedPieces(list(self.white), list(self.black))


@dataclass(frozen=True, slots=True)
class _Snapshot:
    """Everything needed to take back one move."""

    position: GameState
    phase: GamePhase
    winner: Color | None
    end_reason: GameEndReason | None
    captured: CapturedPieces
    pending_promotion: Position | None
    history_length: int


@dataclass
class MatchState:
    """Manages the caller-side bookkeeping around the rules engine.

    The engine never switches turns or records history; this class threads
    :class:`~hotseat.core.state.GameState` snapshots between moves and applies
    the house rule that capturing a king ends the game. No validation happens
    here; :class:`~hotseat.game.controller.GameController` checks legality
    before calling :meth:`apply_move`.
    """

    config: GameConfig = field(default_factory=GameConfig)
    position: GameState = field(default_factory=GameState.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    winner: Color | None = field(default=None, init=False)
    end_reason: GameEndReason | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    captured: CapturedPieces = field(default_factory=CapturedPieces, init=False)
    pending_promotion: Position | None = field(default=None, init=False)
    _undo_stack: list[_Snapshot] = field(default_factory=list, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: GameState | None = None) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else GameState.initial()
        self.phase = GamePhase.AWAITING_MOVE
        self.winner = None
        self.end_reason = None
        self.move_history.clear()
        self.captured = CapturedPieces()
        self.pending_promotion = None
        self._undo_stack.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_pos: Position, to_pos: Position) -> MoveRecord:
        """Apply a validated move and return the history record."""
        before = self.position
        outcome = apply_move(before, from_pos, to_pos)
        move = record_move(before, outcome, from_pos, to_pos)
        mover = before.current_player

        self._push_snapshot()

        record = MoveRecord.from_move(move)
        self.move_history.append(record)
        if outcome.captured_piece is not None:
            self.captured.add(outcome.captured_piece)

        king_taken = (
            outcome.captured_piece is not None
            and outcome.captured_piece.piece_type == PieceType.KING
        )
        if king_taken and self.config.king_capture_ends_game:
            # The winner keeps the move; play stops here
            self.position = GameState(outcome.board, mover, move, None)
            self._finish(mover, GameEndReason.KING_CAPTURED)
            return record

        if outcome.is_promotion:
            self.position = GameState(outcome.board, mover, move, None)
            self.pending_promotion = to_pos
            self.phase = GamePhase.AWAITING_PROMOTION
            return record

        self.position = GameState(
            outcome.board, mover.opposite, move, outcome.en_passant_target
        )
        return record

    def resolve_promotion(self, piece_type: PieceType) -> MoveRecord:
        """Finish a pending promotion and pass the turn."""
        square = self.pending_promotion
        if square is None:
            raise ValueError("No promotion pending")
        if piece_type not in PROMOTION_CHOICES:
            raise ValueError(f"Cannot promote to {piece_type}")

        board = promote_pawn(self.position.board, square, piece_type)
        last = self.move_history[-1]
        move = replace(last.move, promoted_to=piece_type)
        record = MoveRecord.from_move(move)
        self.move_history[-1] = record

        self.position = GameState(board, self.position.current_player.opposite, move, None)
        self.pending_promotion = None
        self.phase = GamePhase.AWAITING_MOVE
        return record

    def undo_last_move(self) -> Move | None:
        """Take back the most recent step: a move or a resignation.

        Returns the undone Move; ``None`` when the step was a resignation or
        there is nothing to undo (see :attr:`can_undo`).
        """
        if not self._undo_stack:
            return None

        snapshot = self._undo_stack.pop()
        undone = self.move_history[snapshot.history_length:]
        del self.move_history[snapshot.history_length:]
        self.position = snapshot.position
        self.phase = snapshot.phase
        self.winner = snapshot.winner
        self.end_reason = snapshot.end_reason
        self.captured = snapshot.captured
        self.pending_promotion = snapshot.pending_promotion
        return undone[-1].move if undone else None

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, color: Color) -> None:
        self._push_snapshot()
        self.pending_promotion = None
        self._finish(color.opposite, GameEndReason.RESIGNATION)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.current_player

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    # ── Internal ─────────────────────────────────────────────────────────

    def _push_snapshot(self) -> None:
        self._undo_stack.append(
            _Snapshot(
                position=self.position,
                phase=self.phase,
                winner=self.winner,
                end_reason=self.end_reason,
                captured=self.captured.copy(),
                pending_promotion=self.pending_promotion,
                history_length=len(self.move_history),
            )
        )

    def _finish(self, winner: Color, reason: GameEndReason) -> None:
        self.winner = winner
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
