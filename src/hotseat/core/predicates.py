"""Per-piece movement predicates.

Each predicate answers whether a piece of the given type standing on
``from_pos`` could travel to ``to_pos`` on this board, ignoring whose turn it
is and what stands on the destination (the orchestrator in
:mod:`hotseat.core.rules` handles both). All of them assume
``from_pos != to_pos``.
"""

from __future__ import annotations

from collections.abc import Callable

from hotseat.core.board import Board
from hotseat.core.enums import CastlingSide, PieceType
from hotseat.core.piece import Piece
from hotseat.core.state import GameState
from hotseat.core.types import Position

KINGSIDE_KING_COL = 6
QUEENSIDE_KING_COL = 2

# side -> (king destination column, rook home column)
CASTLING_COLUMNS: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (KINGSIDE_KING_COL, 7),
    CastlingSide.QUEENSIDE: (QUEENSIDE_KING_COL, 0),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _path_is_clear(board: Board, from_pos: Position, to_pos: Position) -> bool:
    """Every square strictly between the two ends of a straight line is empty.

    Walks a fixed number of steps with both coordinates moved in lockstep, so
    it is only meaningful for rank, file or diagonal lines.
    """
    drow = _sign(to_pos.row - from_pos.row)
    dcol = _sign(to_pos.col - from_pos.col)
    steps = max(abs(to_pos.row - from_pos.row), abs(to_pos.col - from_pos.col))
    for i in range(1, steps):
        if not board.is_empty(Position(from_pos.row + i * drow, from_pos.col + i * dcol)):
            return False
    return True


# -- Pieces ------------------------------------------------------------------


def is_valid_pawn_move(state: GameState, from_pos: Position, to_pos: Position) -> bool:
    board = state.board
    piece = board[from_pos]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False

    direction = piece.color.pawn_direction
    row_step = to_pos.row - from_pos.row
    col_diff = abs(to_pos.col - from_pos.col)

    # Single step forward
    if col_diff == 0 and row_step == direction:
        return board.is_empty(to_pos)

    # Two-square advance from the starting row
    if col_diff == 0 and row_step == 2 * direction:
        if from_pos.row != piece.color.pawn_start_row:
            return False
        skipped = Position(from_pos.row + direction, from_pos.col)
        return board.is_empty(skipped) and board.is_empty(to_pos)

    if col_diff == 1 and row_step == direction:
        target = board[to_pos]
        # Regular diagonal capture
        if target is not None and target.color != piece.color:
            return True
        # En passant onto the skipped square
        return state.en_passant_target == to_pos

    return False


def is_valid_knight_move(from_pos: Position, to_pos: Position) -> bool:
    deltas = (abs(to_pos.row - from_pos.row), abs(to_pos.col - from_pos.col))
    return deltas in ((2, 1), (1, 2))


def is_valid_bishop_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
    row_diff = abs(to_pos.row - from_pos.row)
    col_diff = abs(to_pos.col - from_pos.col)
    if row_diff != col_diff or row_diff == 0:
        return False
    return _path_is_clear(board, from_pos, to_pos)


def is_valid_rook_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
    if from_pos.row != to_pos.row and from_pos.col != to_pos.col:
        return False
    if from_pos == to_pos:
        return False
    return _path_is_clear(board, from_pos, to_pos)


def is_valid_queen_move(board: Board, from_pos: Position, to_pos: Position) -> bool:
    return is_valid_bishop_move(board, from_pos, to_pos) or is_valid_rook_move(
        board, from_pos, to_pos
    )


def is_valid_king_move(state: GameState, from_pos: Position, to_pos: Position) -> bool:
    piece = state.board[from_pos]
    if piece is None or piece.piece_type != PieceType.KING:
        return False

    if abs(to_pos.row - from_pos.row) <= 1 and abs(to_pos.col - from_pos.col) <= 1:
        return True

    return can_castle(state.board, from_pos, to_pos)


def can_castle(board: Board, from_pos: Position, to_pos: Position) -> bool:
    """Castling geometry and moved-flags only; attacked squares are not checked."""
    king = board[from_pos]
    if king is None or king.piece_type != PieceType.KING or king.has_moved:
        return False
    if to_pos.row != from_pos.row or abs(to_pos.col - from_pos.col) != 2:
        return False

    for king_col, rook_col in CASTLING_COLUMNS.values():
        if to_pos.col != king_col:
            continue
        rook_pos = Position(from_pos.row, rook_col)
        rook = board[rook_pos]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            return False
        return _path_is_clear(board, from_pos, rook_pos)
    return False


# -- Dispatch ----------------------------------------------------------------

_Predicate = Callable[[GameState, Position, Position], bool]

_PREDICATES: dict[PieceType, _Predicate] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: lambda state, f, t: is_valid_knight_move(f, t),
    PieceType.BISHOP: lambda state, f, t: is_valid_bishop_move(state.board, f, t),
    PieceType.ROOK: lambda state, f, t: is_valid_rook_move(state.board, f, t),
    PieceType.QUEEN: lambda state, f, t: is_valid_queen_move(state.board, f, t),
    PieceType.KING: is_valid_king_move,
}


def piece_predicate(
    state: GameState, piece: Piece, from_pos: Position, to_pos: Position
) -> bool:
    """Run the movement predicate for *piece*'s type."""
    return _PREDICATES[piece.piece_type](state, from_pos, to_pos)
