"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import ALL_POSITIONS, BOARD_SIZE, Position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(pos: Position) -> int:
    return pos.row * BOARD_SIZE + pos.col


class Board:
    """Immutable 64-square snapshot.

    Updates go through :meth:`replace`, which returns a new board and leaves
    the receiver untouched, so snapshots can be shared freely between game
    states.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * 64
        else:
            self._squares = tuple(squares)
            if len(self._squares) != 64:
                raise ValueError(
                    f"Board needs exactly 64 squares, got {len(self._squares)}"
                )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def is_empty(self, pos: Position) -> bool:
        return self._squares[_index(pos)] is None

    def __iter__(self) -> Iterator[tuple[Position, Piece | None]]:
        return zip(ALL_POSITIONS, self._squares)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[tuple[Position, Piece]]:
        """Occupied squares, optionally restricted to *color*."""
        return [
            (pos, piece)
            for pos, piece in self
            if piece is not None and (color is None or piece.color == color)
        ]

    def find_king(self, color: Color) -> Position | None:
        """Square of *color*'s king, or ``None`` once it has been captured."""
        for pos, piece in self:
            if (
                piece is not None
                and piece.color == color
                and piece.piece_type == PieceType.KING
            ):
                return pos
        return None

    # -- Copy-on-write ------------------------------------------------------

    def replace(self, changes: Mapping[Position, Piece | None]) -> Board:
        """New board with *changes* applied; ``None`` clears a square."""
        squares = list(self._squares)
        for pos, piece in changes.items():
            squares[_index(pos)] = piece
        return Board(squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, every piece unmoved."""
        squares: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            squares[_index(Position(0, col))] = Piece(pt, Color.BLACK)
            squares[_index(Position(1, col))] = Piece(PieceType.PAWN, Color.BLACK)
            squares[_index(Position(6, col))] = Piece(PieceType.PAWN, Color.WHITE)
            squares[_index(Position(7, col))] = Piece(pt, Color.WHITE)
        return cls(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def initialize_board() -> Board:
    """Board for a new game."""
    return Board.initial()
