"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from hotseat.core import GameState, apply_move, is_valid_move, notation_to_position

    state = GameState.initial()
    e2, e4 = notation_to_position("e2"), notation_to_position("e4")
    if is_valid_move(state, e2, e4):
        outcome = apply_move(state, e2, e4)
"""

from hotseat.core.applier import (
    PROMOTION_CHOICES,
    apply_move,
    next_state,
    promote_pawn,
    record_move,
)
from hotseat.core.board import Board, initialize_board
from hotseat.core.enums import CastlingSide, Color, PieceType
from hotseat.core.move import CastlingInfo, Move, MoveOutcome
from hotseat.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    format_history,
    move_to_text,
    notation_to_position,
    position_to_notation,
)
from hotseat.core.piece import Piece
from hotseat.core.rules import (
    get_valid_moves,
    is_castling_move,
    is_en_passant_move,
    is_pawn_promotion,
    is_valid_move,
)
from hotseat.core.safety import is_in_check, is_square_attacked, would_expose_king
from hotseat.core.state import GameState
from hotseat.core.types import ALL_POSITIONS, Position, is_on_board

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_POSITIONS",
    "Position",
    "is_on_board",
    # Domain objects
    "Board",
    "CastlingInfo",
    "GameState",
    "Move",
    "MoveOutcome",
    "Piece",
    "initialize_board",
    # Rules
    "get_valid_moves",
    "is_castling_move",
    "is_en_passant_move",
    "is_pawn_promotion",
    "is_valid_move",
    # Application
    "PROMOTION_CHOICES",
    "apply_move",
    "next_state",
    "promote_pawn",
    "record_move",
    # King safety
    "is_in_check",
    "is_square_attacked",
    "would_expose_king",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "format_history",
    "move_to_text",
    "notation_to_position",
    "position_to_notation",
]
