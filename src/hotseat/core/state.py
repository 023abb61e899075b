"""GameState: the snapshot the caller threads between engine calls."""

from __future__ import annotations

from dataclasses import dataclass, field

from hotseat.core.board import Board
from hotseat.core.enums import Color
from hotseat.core.move import Move
from hotseat.core.types import Position


@dataclass(frozen=True, slots=True)
class GameState:
    """Board + side to move + last move + en-passant target.

    ``en_passant_target`` names the square a pawn skipped on the immediately
    preceding move and is valid for exactly one ply.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Color = Color.WHITE
    last_move: Move | None = None
    en_passant_target: Position | None = None

    @classmethod
    def initial(cls) -> GameState:
        return cls()
