"""Game management layer: controller, match state, settings.

Quick start::

    from hotseat.core import notation_to_position as sq
    from hotseat.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(sq("e2"), sq("e4"))
"""

from hotseat.game.config import GameConfig
from hotseat.game.controller import GameController, GameEvents
from hotseat.game.interfaces import GameEndReason, GamePhase
from hotseat.game.state import CapturedPieces, MatchState, MoveRecord

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    # Concrete
    "CapturedPieces",
    "GameConfig",
    "GameController",
    "GameEvents",
    "MatchState",
    "MoveRecord",
]
