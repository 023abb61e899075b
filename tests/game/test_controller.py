"""Tests for GameController: the orchestrator."""

from hotseat.core.enums import Color, PieceType
from hotseat.core.notation import board_from_fen
from hotseat.core.notation import notation_to_position as sq
from hotseat.core.piece import Piece
from hotseat.core.state import GameState
from hotseat.game.config import GameConfig
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GameEndReason, GamePhase


def _make_controller(
    placement: str | None = None,
    config: GameConfig | None = None,
) -> GameController:
    """Helper: controller with a fresh game, optionally from a FEN placement."""
    ctrl = GameController(config)
    position = GameState(board_from_fen(placement)) if placement else None
    ctrl.new_game(position=position)
    return ctrl


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE

    def test_white_moves_first(self) -> None:
        ctrl = _make_controller()
        assert ctrl.state.side_to_move == Color.WHITE

    def test_new_game_resets(self) -> None:
        ctrl = _make_controller()
        ctrl.submit_move(sq("e2"), sq("e4"))
        ctrl.new_game()
        assert ctrl.state.ply_count == 0
        assert ctrl.position == GameState.initial()

    def test_new_game_replaces_config(self) -> None:
        ctrl = _make_controller()
        cfg = GameConfig(enforce_king_safety=True)
        ctrl.new_game(cfg)
        assert ctrl.config is cfg


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move(sq("e2"), sq("e4"))
        assert ctrl.state.side_to_move == Color.BLACK

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(sq("e2"), sq("e5"))
        assert ctrl.state.side_to_move == Color.WHITE
        assert ctrl.state.ply_count == 0

    def test_out_of_turn_rejected(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.submit_move(sq("e7"), sq("e5"))

    def test_move_event_fires(self) -> None:
        ctrl = _make_controller()
        texts: list[str] = []
        ctrl.events.on_move.append(lambda record, state: texts.append(record.text))
        ctrl.submit_move(sq("e2"), sq("e4"))
        ctrl.submit_move(sq("b8"), sq("c6"))
        assert texts == ["Pe2-e4", "Nb8-c6"]

    def test_phase_event_fires(self) -> None:
        ctrl = _make_controller()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        ctrl.submit_move(sq("e2"), sq("e4"))
        assert phases == [GamePhase.AWAITING_MOVE]

    def test_valid_targets(self) -> None:
        ctrl = _make_controller()
        assert ctrl.valid_targets(sq("g1")) == [sq("f3"), sq("h3")]
        assert ctrl.valid_targets(sq("g8")) == []

    def test_en_passant_capture_tracked(self) -> None:
        ctrl = _make_controller("4k3/3p4/8/4P3/8/8/8/4K3")
        ctrl.submit_move(sq("e1"), sq("f1"))
        ctrl.submit_move(sq("d7"), sq("d5"))
        assert ctrl.submit_move(sq("e5"), sq("d6"))
        last = ctrl.state.move_history[-1]
        assert last.move.is_en_passant
        assert last.text == "Pe5xd6"
        assert ctrl.state.captured.black == [Piece(PieceType.PAWN, Color.BLACK, True)]
        assert ctrl.position.board[sq("d5")] is None

    def test_castling_recorded(self) -> None:
        ctrl = _make_controller("r3k2r/8/8/8/8/8/8/R3K2R")
        assert ctrl.submit_move(sq("e1"), sq("g1"))
        assert ctrl.state.move_history[-1].text == "O-O"
        assert ctrl.position.board[sq("f1")] == Piece(PieceType.ROOK, Color.WHITE, True)


class TestKingCapture:
    def test_game_over_event(self) -> None:
        ctrl = _make_controller("4k3/8/8/8/8/8/8/4Q2K")
        results: list[tuple[Color, GameEndReason]] = []
        ctrl.events.on_game_over.append(lambda w, r: results.append((w, r)))
        assert ctrl.submit_move(sq("e1"), sq("e8"))
        assert results == [(Color.WHITE, GameEndReason.KING_CAPTURED)]
        assert ctrl.state.is_game_over
        assert ctrl.state.captured.black == [Piece(PieceType.KING, Color.BLACK)]

    def test_no_moves_after_game_over(self) -> None:
        ctrl = _make_controller("4k3/8/8/8/8/8/8/4Q2K")
        ctrl.submit_move(sq("e1"), sq("e8"))
        assert not ctrl.submit_move(sq("h1"), sq("h2"))
        assert ctrl.valid_targets(sq("h1")) == []

    def test_play_continues_when_rule_disabled(self) -> None:
        ctrl = _make_controller(
            "4k3/8/8/8/8/8/8/4Q2K", GameConfig(king_capture_ends_game=False)
        )
        ctrl.submit_move(sq("e1"), sq("e8"))
        assert not ctrl.state.is_game_over
        assert ctrl.state.side_to_move == Color.BLACK


class TestPromotion:
    def test_pending_promotion_flow(self) -> None:
        ctrl = _make_controller("4k3/P7/8/8/8/8/8/4K3")
        squares = []
        ctrl.events.on_promotion_required.append(squares.append)
        assert ctrl.submit_move(sq("a7"), sq("a8"))
        assert squares == [sq("a8")]
        assert ctrl.state.phase == GamePhase.AWAITING_PROMOTION

        # Nothing else can happen until the choice is made
        assert not ctrl.submit_move(sq("e1"), sq("e2"))
        assert ctrl.valid_targets(sq("e1")) == []

        assert ctrl.choose_promotion(PieceType.QUEEN)
        assert ctrl.position.board[sq("a8")] == Piece(PieceType.QUEEN, Color.WHITE, True)
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.state.move_history[-1].text == "Pa7-a8=Q"

    def test_choose_without_pending(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.choose_promotion(PieceType.QUEEN)

    def test_choose_invalid_piece(self) -> None:
        ctrl = _make_controller("4k3/P7/8/8/8/8/8/4K3")
        ctrl.submit_move(sq("a7"), sq("a8"))
        assert not ctrl.choose_promotion(PieceType.KING)
        assert ctrl.state.phase == GamePhase.AWAITING_PROMOTION

    def test_auto_promotion(self) -> None:
        ctrl = _make_controller(
            "4k3/P7/8/8/8/8/8/4K3", GameConfig(auto_promote_to=PieceType.KNIGHT)
        )
        assert ctrl.submit_move(sq("a7"), sq("a8"))
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.position.board[sq("a8")] == Piece(PieceType.KNIGHT, Color.WHITE, True)
        assert ctrl.state.side_to_move == Color.BLACK

    def test_auto_promotion_emits_one_move(self) -> None:
        ctrl = _make_controller(
            "4k3/P7/8/8/8/8/8/4K3", GameConfig(auto_promote_to=PieceType.QUEEN)
        )
        texts: list[str] = []
        ctrl.events.on_move.append(lambda record, state: texts.append(record.text))
        assert ctrl.submit_move(sq("a7"), sq("a8"))
        assert texts == ["Pa7-a8=Q"]

    def test_manual_promotion_emits_landing_then_choice(self) -> None:
        ctrl = _make_controller("4k3/P7/8/8/8/8/8/4K3")
        texts: list[str] = []
        ctrl.events.on_move.append(lambda record, state: texts.append(record.text))
        ctrl.submit_move(sq("a7"), sq("a8"))
        ctrl.choose_promotion(PieceType.ROOK)
        assert texts == ["Pa7-a8", "Pa7-a8=R"]


class TestKingSafety:
    def test_pinned_piece_rejected(self) -> None:
        ctrl = _make_controller(
            "4k3/4r3/8/8/8/8/4B3/4K3", GameConfig(enforce_king_safety=True)
        )
        assert not ctrl.submit_move(sq("e2"), sq("d3"))
        assert ctrl.valid_targets(sq("e2")) == []

    def test_pinned_piece_allowed_by_default(self) -> None:
        ctrl = _make_controller("4k3/4r3/8/8/8/8/4B3/4K3")
        assert ctrl.submit_move(sq("e2"), sq("d3"))


class TestResignAndUndo:
    def test_resign(self) -> None:
        ctrl = _make_controller()
        results: list[tuple[Color, GameEndReason]] = []
        ctrl.events.on_game_over.append(lambda w, r: results.append((w, r)))
        ctrl.resign(Color.WHITE)
        assert results == [(Color.BLACK, GameEndReason.RESIGNATION)]
        ctrl.resign(Color.BLACK)
        assert len(results) == 1

    def test_undo(self) -> None:
        ctrl = _make_controller()
        ctrl.submit_move(sq("e2"), sq("e4"))
        assert ctrl.undo_move()
        assert ctrl.position == GameState.initial()
        assert ctrl.state.side_to_move == Color.WHITE

    def test_undo_empty(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.undo_move()

    def test_undo_after_king_capture(self) -> None:
        ctrl = _make_controller("4k3/8/8/8/8/8/8/4Q2K")
        ctrl.submit_move(sq("e1"), sq("e8"))
        assert ctrl.undo_move()
        assert not ctrl.state.is_game_over
        assert ctrl.submit_move(sq("e1"), sq("e7"))

    def test_undo_resignation_keeps_moves(self) -> None:
        ctrl = _make_controller()
        ctrl.submit_move(sq("e2"), sq("e4"))
        ctrl.resign(Color.BLACK)
        assert ctrl.undo_move()
        assert ctrl.state.ply_count == 1
        assert ctrl.state.phase == GamePhase.AWAITING_MOVE
        assert ctrl.state.side_to_move == Color.BLACK
        assert ctrl.submit_move(sq("e7"), sq("e5"))
