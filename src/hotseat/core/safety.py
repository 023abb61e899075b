"""Optional king-safety layer built on top of the piece predicates.

Nothing in :mod:`hotseat.core.rules` calls into this module; callers that want
standard check rules compose it with :func:`~hotseat.core.rules.is_valid_move`.
"""

from __future__ import annotations

from hotseat.core.applier import apply_move
from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.predicates import (
    is_valid_bishop_move,
    is_valid_knight_move,
    is_valid_queen_move,
    is_valid_rook_move,
)
from hotseat.core.state import GameState
from hotseat.core.types import Position


def _attacks(board: Board, attacker: Position, target: Position) -> bool:
    piece = board[attacker]
    if piece is None or attacker == target:
        return False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        # Pawns attack diagonally only, whether or not the square is occupied
        return (
            target.row - attacker.row == piece.color.pawn_direction
            and abs(target.col - attacker.col) == 1
        )
    if ptype == PieceType.KNIGHT:
        return is_valid_knight_move(attacker, target)
    if ptype == PieceType.BISHOP:
        return is_valid_bishop_move(board, attacker, target)
    if ptype == PieceType.ROOK:
        return is_valid_rook_move(board, attacker, target)
    if ptype == PieceType.QUEEN:
        return is_valid_queen_move(board, attacker, target)
    # King: castling never captures
    return abs(target.row - attacker.row) <= 1 and abs(target.col - attacker.col) <= 1


def is_square_attacked(board: Board, position: Position, by_color: Color) -> bool:
    """Is *position* attacked by any piece of *by_color*?"""
    return any(_attacks(board, sq, position) for sq, _ in board.pieces(by_color))


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked? A missing king is never in check."""
    king_pos = board.find_king(color)
    if king_pos is None:
        return False
    return is_square_attacked(board, king_pos, color.opposite)


def would_expose_king(state: GameState, from_pos: Position, to_pos: Position) -> bool:
    """Would playing this move leave the mover's king attacked?

    Castling additionally fails when the king starts on or passes through an
    attacked square.
    """
    piece = state.board[from_pos]
    if piece is None:
        return False
    color = piece.color
    opponent = color.opposite

    outcome = apply_move(state, from_pos, to_pos)
    if outcome.is_castling:
        if is_square_attacked(state.board, from_pos, opponent):
            return True
        step = 1 if to_pos.col > from_pos.col else -1
        crossed = Position(from_pos.row, from_pos.col + step)
        if is_square_attacked(state.board, crossed, opponent):
            return True

    return is_in_check(outcome.board, color)
