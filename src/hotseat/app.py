"""Console entry point: two players taking turns at one terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from hotseat.core.board import Board
from hotseat.core.enums import Color, PieceType
from hotseat.core.notation import format_history, notation_to_position
from hotseat.core.types import BOARD_SIZE, Position
from hotseat.game.config import GameConfig
from hotseat.game.controller import GameController
from hotseat.game.interfaces import GameEndReason, GamePhase

_LOGGER = logging.getLogger(__name__)

_PROMOTION_KEYS: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}

_HELP = (
    "Commands: <from> <to> (e.g. 'e2 e4' or 'e2e4'), 'moves <square>', "
    "'history', 'undo', 'resign', 'new', 'help', 'quit'"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotseat", description=__doc__)
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--enforce-king-safety",
        action="store_true",
        help="reject moves that leave your own king attacked",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="draw pieces with Unicode chess symbols",
    )
    return parser


def _parse_move(text: str) -> tuple[Position, Position] | None:
    parts = text.split()
    if len(parts) == 1 and len(parts[0]) == 4:
        parts = [parts[0][:2], parts[0][2:]]
    if len(parts) != 2:
        return None
    try:
        return notation_to_position(parts[0]), notation_to_position(parts[1])
    except ValueError:
        return None


def _render_board(board: Board) -> str:
    """Board diagram like ``repr(board)`` but with Unicode piece symbols."""
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board[Position(row, col)]
            cells.append(piece.symbol if piece else ".")
        rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
    rows.append("  a b c d e f g h")
    return "\n".join(rows)


class ConsoleGame:
    """Line-oriented front end over :class:`GameController`."""

    def __init__(
        self, controller: GameController, out: TextIO, *, unicode: bool = False
    ) -> None:
        self._ctrl = controller
        self._out = out
        self._unicode = unicode
        controller.events.on_game_over.append(self._announce_winner)

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    def _announce_winner(self, winner: Color, reason: GameEndReason) -> None:
        name = str(winner).capitalize()
        if reason == GameEndReason.KING_CAPTURED:
            self._print(f"{name} wins the game by capturing the king!")
        else:
            self._print(f"{name} wins by resignation.")

    def show(self) -> None:
        board = self._ctrl.position.board
        self._print(_render_board(board) if self._unicode else repr(board))
        state = self._ctrl.state
        if state.phase == GamePhase.AWAITING_PROMOTION:
            self._print("Promote to (q/r/b/n)?")
        elif not state.is_game_over:
            side = str(state.side_to_move).capitalize()
            self._print(f"Move {state.fullmove_display}: {side} to move")

    def handle(self, line: str) -> bool:
        """Process one input line; ``False`` means the session should end."""
        text = line.strip().lower()
        if not text:
            return True
        if text in ("quit", "exit"):
            return False

        state = self._ctrl.state
        if state.phase == GamePhase.AWAITING_PROMOTION and text in _PROMOTION_KEYS:
            self._ctrl.choose_promotion(_PROMOTION_KEYS[text])
            self.show()
            return True

        if text == "help":
            self._print(_HELP)
        elif text == "new":
            self._ctrl.new_game()
            self.show()
        elif text == "undo":
            if self._ctrl.undo_move():
                self.show()
            else:
                self._print("Nothing to undo")
        elif text == "resign":
            self._ctrl.resign(state.side_to_move)
        elif text == "history":
            moves = [record.move for record in state.move_history]
            for entry in format_history(moves) or ["No moves yet"]:
                self._print(entry)
        elif text.startswith("moves "):
            self._show_targets(text[len("moves "):].strip())
        else:
            self._play(text)
        return True

    def _show_targets(self, square: str) -> None:
        try:
            pos = notation_to_position(square)
        except ValueError as exc:
            self._print(str(exc))
            return
        targets = self._ctrl.valid_targets(pos)
        self._print(" ".join(str(t) for t in targets) if targets else "No legal moves")

    def _play(self, text: str) -> None:
        state = self._ctrl.state
        if state.is_game_over:
            self._print("Game is over; type 'new' to start again")
            return
        parsed = _parse_move(text)
        if parsed is None:
            self._print(f"Unrecognised input: {text!r}. {_HELP}")
            return
        from_pos, to_pos = parsed
        piece = self._ctrl.position.board[from_pos]
        if piece is not None and piece.color != state.side_to_move:
            self._print(f"It's {state.side_to_move}'s turn")
            return
        if not self._ctrl.submit_move(from_pos, to_pos):
            self._print("Invalid move")
            return
        self.show()


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run a hot-seat game on the terminal."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config = GameConfig.from_env()
    if args.enforce_king_safety:
        config = GameConfig(
            king_capture_ends_game=config.king_capture_ends_game,
            enforce_king_safety=True,
            auto_promote_to=config.auto_promote_to,
        )

    src = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    controller = GameController(config)
    console = ConsoleGame(controller, out, unicode=args.unicode)
    controller.new_game()
    console.show()

    for line in src:
        if not console.handle(line):
            break
    _LOGGER.debug("Session ended after %d plies", controller.state.ply_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
