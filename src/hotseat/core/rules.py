"""Move legality orchestrator and special-move classifiers."""

from __future__ import annotations

from hotseat.core.enums import CastlingSide, PieceType
from hotseat.core.move import CastlingInfo
from hotseat.core.piece import Piece
from hotseat.core.predicates import piece_predicate
from hotseat.core.state import GameState
from hotseat.core.types import ALL_POSITIONS, Position


def is_valid_move(state: GameState, from_pos: Position, to_pos: Position) -> bool:
    """Whether the side to move may play ``from_pos -> to_pos``.

    Does not consider check: a move that leaves the mover's king attacked is
    still valid here (see :mod:`hotseat.core.safety`).
    """
    if from_pos == to_pos:
        return False

    board = state.board
    piece = board[from_pos]
    if piece is None:
        return False
    if piece.color != state.current_player:
        return False

    target = board[to_pos]
    if target is not None and target.color == piece.color:
        return False

    return piece_predicate(state, piece, from_pos, to_pos)


def get_valid_moves(state: GameState, from_pos: Position) -> list[Position]:
    """All destinations accepted by :func:`is_valid_move`, in row-major order."""
    return [to_pos for to_pos in ALL_POSITIONS if is_valid_move(state, from_pos, to_pos)]


# -- Special-move classifiers --------------------------------------------------


def is_pawn_promotion(position: Position, piece: Piece) -> bool:
    """A pawn standing on the opponent's back rank."""
    return (
        piece.piece_type == PieceType.PAWN and position.row == piece.color.promotion_row
    )


def is_castling_move(from_pos: Position, to_pos: Position, piece: Piece) -> CastlingInfo:
    """A king moving two columns along its row."""
    if piece.piece_type != PieceType.KING:
        return CastlingInfo(False)
    if from_pos.row != to_pos.row or abs(to_pos.col - from_pos.col) != 2:
        return CastlingInfo(False)
    side = CastlingSide.KINGSIDE if to_pos.col > from_pos.col else CastlingSide.QUEENSIDE
    return CastlingInfo(True, side)


def is_en_passant_move(
    from_pos: Position,
    to_pos: Position,
    piece: Piece,
    en_passant_target: Position | None,
) -> bool:
    """A pawn landing on the current en-passant target square."""
    if en_passant_target is None or piece.piece_type != PieceType.PAWN:
        return False
    return to_pos == en_passant_target
