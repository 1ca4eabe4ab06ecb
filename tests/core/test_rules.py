"""Tests for Rules — forced capture, chains and result detection."""

from checkie.core.board import Board
from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import Cell


def _position(*pieces: tuple[Player, int, int], to_move: Player = Player.BELOW) -> Position:
    board = Board()
    for entry in pieces:
        board.place(Piece(*entry))
    return Position(board, to_move)


class TestForcedCapture:
    def test_not_forced_at_start(self) -> None:
        assert not Rules.is_forced_capture(Position())

    def test_forced_when_jump_exists(self) -> None:
        pos = _position((Player.BELOW, 3, 2), (Player.ABOVE, 2, 3))
        assert Rules.is_forced_capture(pos)


class TestCaptureChain:
    def test_chain_detected(self) -> None:
        pos = _position(
            (Player.BELOW, 5, 0),
            (Player.ABOVE, 4, 1),
            (Player.ABOVE, 2, 3),
        )
        assert not Rules.is_capture_chain(pos)
        pos.make_move(Move(Cell(5, 0), Cell(3, 2)))
        assert Rules.is_capture_chain(pos)


class TestResult:
    def test_in_progress(self) -> None:
        pos = Position()
        assert Rules.winner(pos) is None
        assert Rules.game_result(pos) == GameResult.IN_PROGRESS

    def test_below_wins_when_above_stuck(self) -> None:
        pos = _position((Player.BELOW, 5, 0), to_move=Player.ABOVE)
        assert Rules.winner(pos) == Player.BELOW
        assert Rules.game_result(pos) == GameResult.BELOW_WINS

    def test_above_wins_when_below_blocked(self) -> None:
        pos = _position((Player.BELOW, 1, 0), (Player.ABOVE, 0, 1))
        assert Rules.winner(pos) == Player.ABOVE
        assert Rules.game_result(pos) == GameResult.ABOVE_WINS

    def test_result_after_last_capture(self) -> None:
        pos = _position((Player.BELOW, 3, 2), (Player.ABOVE, 2, 3))
        pos.make_move(Move(Cell(3, 2), Cell(1, 4)))
        assert Rules.game_result(pos) == GameResult.BELOW_WINS
