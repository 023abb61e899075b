"""Move application and promotion resolution."""

from __future__ import annotations

from hotseat.core.board import Board
from hotseat.core.enums import CastlingSide, PieceType
from hotseat.core.move import Move, MoveOutcome
from hotseat.core.piece import Piece
from hotseat.core.rules import is_castling_move, is_en_passant_move, is_pawn_promotion
from hotseat.core.state import GameState
from hotseat.core.types import Position

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# side -> (rook from column, rook to column)
_CASTLING_ROOK_COLUMNS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}


def apply_move(state: GameState, from_pos: Position, to_pos: Position) -> MoveOutcome:
    """Play an already validated move on a copy of ``state.board``.

    Executes the castling rook hop and the en-passant capture, and computes the
    next en-passant target. Turn switching, history and the promotion choice
    are left to the caller.
    """
    board = state.board
    piece = board[from_pos]
    if piece is None:
        raise ValueError(f"No piece on {from_pos}")

    # Classify against the pre-move state
    is_promotion = is_pawn_promotion(to_pos, piece)
    castling = is_castling_move(from_pos, to_pos, piece)
    is_en_passant = is_en_passant_move(from_pos, to_pos, piece, state.en_passant_target)

    captured = board[to_pos]
    changes: dict[Position, Piece | None] = {
        from_pos: None,
        to_pos: piece.moved(),
    }

    if castling.is_castling and castling.side is not None:
        rook_from_col, rook_to_col = _CASTLING_ROOK_COLUMNS[castling.side]
        rook_from = Position(from_pos.row, rook_from_col)
        rook = board[rook_from]
        if rook is not None:
            changes[rook_from] = None
            changes[Position(from_pos.row, rook_to_col)] = rook.moved()

    if is_en_passant:
        # The victim sits beside the mover, one row behind the landing square
        victim_pos = Position(to_pos.row - piece.color.pawn_direction, to_pos.col)
        captured = board[victim_pos]
        changes[victim_pos] = None

    en_passant_target: Position | None = None
    if piece.piece_type == PieceType.PAWN and abs(to_pos.row - from_pos.row) == 2:
        en_passant_target = Position((from_pos.row + to_pos.row) // 2, from_pos.col)

    return MoveOutcome(
        board=board.replace(changes),
        captured_piece=captured,
        is_promotion=is_promotion,
        is_castling=castling.is_castling,
        castling_side=castling.side,
        is_en_passant=is_en_passant,
        en_passant_target=en_passant_target,
    )


def record_move(
    state: GameState, outcome: MoveOutcome, from_pos: Position, to_pos: Position
) -> Move:
    """History record for a move whose *outcome* was computed from *state*."""
    piece = state.board[from_pos]
    if piece is None:
        raise ValueError(f"No piece on {from_pos}")
    return Move(
        from_pos=from_pos,
        to_pos=to_pos,
        piece=piece,
        captured_piece=outcome.captured_piece,
        is_promotion=outcome.is_promotion,
        is_castling=outcome.is_castling,
        castling_side=outcome.castling_side,
        is_en_passant=outcome.is_en_passant,
    )


def next_state(
    state: GameState, outcome: MoveOutcome, from_pos: Position, to_pos: Position
) -> GameState:
    """Successor snapshot: new board, opponent to move, one-ply en-passant window."""
    return GameState(
        board=outcome.board,
        current_player=state.current_player.opposite,
        last_move=record_move(state, outcome, from_pos, to_pos),
        en_passant_target=outcome.en_passant_target,
    )


def promote_pawn(board: Board, position: Position, new_type: PieceType) -> Board:
    """Swap the pawn on *position* for a *new_type* piece of the same color.

    Returns *board* itself when the square holds no pawn or *new_type* is not
    one of :data:`PROMOTION_CHOICES`. The back-rank check is the caller's job
    (:func:`~hotseat.core.rules.is_pawn_promotion`).
    """
    piece = board[position]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return board
    if new_type not in PROMOTION_CHOICES:
        return board
    return board.replace({position: Piece(new_type, piece.color, has_moved=True)})
