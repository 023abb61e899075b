"""Algebraic squares, FEN piece placement and move-history text."""

from __future__ import annotations

from collections.abc import Iterable

from hotseat.core.board import Board
from hotseat.core.enums import CastlingSide, Color, PieceType
from hotseat.core.move import Move
from hotseat.core.piece import Piece
from hotseat.core.types import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_FILES = "abcdefgh"
_RANKS = "12345678"

_PIECE_LETTER: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


# ── Squares ──────────────────────────────────────────────────────────────────


def notation_to_position(text: str) -> Position:
    """Parse a square name, e.g. 'e4' → Position(row=4, col=4)."""
    if len(text) != 2 or text[0] not in _FILES or text[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {text!r}")
    return Position(BOARD_SIZE - int(text[1]), ord(text[0]) - ord("a"))


def position_to_notation(position: Position) -> str:
    """Square name, e.g. Position(row=7, col=0) → 'a1'."""
    return _FILES[position.col] + str(BOARD_SIZE - position.row)


# ── FEN placement ────────────────────────────────────────────────────────────


def board_from_fen(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string.

    Only the first field is read; any trailing fields are ignored. Every
    parsed piece is unmoved.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Invalid FEN (empty placement): {placement!r}")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    changes: dict[Position, Piece | None] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
                continue
            if col >= BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank {rank_text!r}: {placement!r}")
            changes[Position(row, col)] = Piece.from_char(ch)
            col += 1
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank {rank_text!r}: {placement!r}")
    return Board.empty().replace(changes)


def board_to_fen(board: Board) -> str:
    """Piece-placement field for *board*."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE):
        text = ""
        gap = 0
        for col in range(BOARD_SIZE):
            piece = board[Position(row, col)]
            if piece is None:
                gap += 1
                continue
            if gap:
                text += str(gap)
                gap = 0
            text += str(piece)
        if gap:
            text += str(gap)
        ranks.append(text)
    return "/".join(ranks)


# ── Move history ─────────────────────────────────────────────────────────────


def move_to_text(move: Move) -> str:
    """History entry, e.g. 'Pe2-e4', 'Nb1xc3', 'O-O', 'Pe7-e8=Q'."""
    if move.is_castling:
        return "O-O" if move.castling_side == CastlingSide.KINGSIDE else "O-O-O"

    separator = "x" if move.is_capture else "-"
    text = (
        f"{_PIECE_LETTER[move.piece.piece_type]}"
        f"{position_to_notation(move.from_pos)}{separator}"
        f"{position_to_notation(move.to_pos)}"
    )
    if move.promoted_to is not None:
        text += f"={_PIECE_LETTER[move.promoted_to]}"
    return text


def format_history(moves: Iterable[Move]) -> list[str]:
    """Numbered history lines: '1. Pe2-e4', '1... Pe7-e5', ..."""
    lines: list[str] = []
    for ply, move in enumerate(moves):
        number = ply // 2 + 1
        dots = "..." if move.piece.color == Color.BLACK else "."
        lines.append(f"{number}{dots} {move_to_text(move)}")
    return lines
