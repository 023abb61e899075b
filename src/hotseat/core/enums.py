"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (white moves toward row 0)."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_start_row(self) -> int:
        return 6 if self is Color.WHITE else 1

    @property
    def back_rank(self) -> int:
        """Home row of this side's pieces."""
        return 7 if self is Color.WHITE else 0

    @property
    def promotion_row(self) -> int:
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class CastlingSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 0
    QUEENSIDE = 1

    def __str__(self) -> str:
        return self.name.lower()
