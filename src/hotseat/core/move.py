"""Move records and applier results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from hotseat.core.enums import CastlingSide, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import Position

if TYPE_CHECKING:
    from hotseat.core.board import Board


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of a played move, used for history display."""

    from_pos: Position
    to_pos: Position
    piece: Piece
    captured_piece: Piece | None = None
    is_promotion: bool = False
    promoted_to: PieceType | None = None
    is_castling: bool = False
    castling_side: CastlingSide | None = None
    is_en_passant: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_pos}{self.to_pos}"


class CastlingInfo(NamedTuple):
    is_castling: bool
    side: CastlingSide | None = None


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What :func:`~hotseat.core.applier.apply_move` produced.

    ``en_passant_target`` replaces the previous target outright; it is set
    only after a two-square pawn advance.
    """

    board: Board
    captured_piece: Piece | None = None
    is_promotion: bool = False
    is_castling: bool = False
    castling_side: CastlingSide | None = None
    is_en_passant: bool = False
    en_passant_target: Position | None = None
