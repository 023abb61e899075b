"""Game-layer enumerations."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a hot-seat game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()  # pawn landed on the back rank, piece not chosen
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why the game finished."""

    KING_CAPTURED = auto()
    RESIGNATION = auto()
