"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hotseat.core.enums import Color
from hotseat.core.notation import board_from_fen, notation_to_position
from hotseat.core.state import GameState

StateFactory = Callable[..., GameState]


@pytest.fixture
def start_state() -> GameState:
    """Standard starting position, White to move."""
    return GameState.initial()


@pytest.fixture
def make_state() -> StateFactory:
    """Build a GameState from a FEN placement, side to move and en-passant square."""

    def _make(
        placement: str,
        to_move: Color = Color.WHITE,
        en_passant: str | None = None,
    ) -> GameState:
        return GameState(
            board=board_from_fen(placement),
            current_player=to_move,
            en_passant_target=notation_to_position(en_passant) if en_passant else None,
        )

    return _make
