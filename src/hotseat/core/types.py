"""Board coordinates.

Board layout (row-major, viewed from White's side):
    row 0 = rank 8 (Black's back rank) ... row 7 = rank 1 (White's back rank)
    col 0 = file a ... col 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


def is_on_board(row: int, col: int) -> bool:
    """Check whether a (row, col) pair addresses a real square."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable square coordinate; both components lie in ``[0, 7]``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.col):
            raise ValueError(f"Position out of range: ({self.row}, {self.col})")

    def __str__(self) -> str:
        return chr(ord("a") + self.col) + str(BOARD_SIZE - self.row)


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
