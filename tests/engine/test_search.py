"""Tests for the greedy move selector."""

from __future__ import annotations

import pytest

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.types import Cell
from checkie.engine.greedy import GreedySearchEngine


def _capture_position() -> Position:
    board = Board()
    board.place(Piece(Player.BELOW, 3, 2))
    board.place(Piece(Player.ABOVE, 2, 3))
    board.place(Piece(Player.ABOVE, 0, 7))
    return Position(board)


class TestScoring:
    def test_opening_scores(self) -> None:
        engine = GreedySearchEngine(seed=1)
        pos = Position()
        moves = pos.all_valid_moves()
        scores = dict(zip((str(m) for m in moves), engine.score_moves(pos, moves)))
        assert scores == {
            "21-17": -1,
            "22-17": 1,
            "22-18": -1,
            "23-18": -1,
            "23-19": 0,
            "24-19": -1,
            "24-20": 1,
        }

    def test_best_moves_keeps_input_order(self) -> None:
        engine = GreedySearchEngine(seed=1)
        pos = Position()
        score, best = engine.best_moves(pos, pos.all_valid_moves())
        assert score == 1
        assert [str(m) for m in best] == ["22-17", "24-20"]

    def test_scoring_leaves_position_untouched(self) -> None:
        engine = GreedySearchEngine(seed=1)
        pos = Position()
        before = pos.copy()
        engine.score_moves(pos, pos.all_valid_moves())
        assert pos == before


class TestChooseMove:
    def test_prefers_capture(self) -> None:
        pos = _capture_position()
        step = Move(Cell(3, 2), Cell(2, 1))
        jump = Move(Cell(3, 2), Cell(1, 4))
        engine = GreedySearchEngine(lambda n: 0)
        assert engine.score_moves(pos, [step, jump]) == [-19, -14]
        assert engine.choose_move(pos, [step, jump]) == jump

    def test_random_source_breaks_ties(self) -> None:
        pos = Position()
        moves = pos.all_valid_moves()
        first = GreedySearchEngine(lambda n: 0).choose_move(pos, moves)
        last = GreedySearchEngine(lambda n: n - 1).choose_move(pos, moves)
        assert str(first) == "22-17"
        assert str(last) == "24-20"

    def test_random_source_sees_tie_count(self) -> None:
        seen: list[int] = []

        def source(n: int) -> int:
            seen.append(n)
            return 0

        GreedySearchEngine(source).search(Position())
        assert seen == [2]

    def test_empty_candidates_rejected(self) -> None:
        with pytest.raises(ValueError):
            GreedySearchEngine(seed=1).choose_move(Position(), [])

    def test_out_of_range_random_source_rejected(self) -> None:
        engine = GreedySearchEngine(lambda n: n)
        with pytest.raises(ValueError):
            engine.choose_move(Position(), Position().all_valid_moves())

    def test_seed_is_deterministic(self) -> None:
        pos = Position()
        moves = pos.all_valid_moves()
        a = GreedySearchEngine(seed=42)
        b = GreedySearchEngine(seed=42)
        assert [a.choose_move(pos, moves) for _ in range(10)] == [
            b.choose_move(pos, moves) for _ in range(10)
        ]


class TestSearch:
    def test_result_fields(self) -> None:
        result = GreedySearchEngine(lambda n: 0).search(Position())
        assert str(result.best_move) == "22-17"
        assert result.score == 1
        assert result.candidates == 7
        assert result.tied == 2

    def test_forced_capture_only_candidate(self) -> None:
        result = GreedySearchEngine(seed=3).search(_capture_position())
        assert result.best_move == Move(Cell(3, 2), Cell(1, 4))
        assert result.candidates == 1

    def test_no_move_when_game_over(self) -> None:
        result = GreedySearchEngine(seed=3).search(Position.empty())
        assert result.best_move is None
        assert result.candidates == 0

    def test_selfplay_stays_legal(self) -> None:
        engine = GreedySearchEngine(seed=7)
        pos = Position()
        for _ in range(200):
            if pos.game_over:
                break
            for piece in pos.board.pieces():
                assert not piece.should_be_king
            captures = pos.all_valid_captures()
            if captures:
                assert pos.all_valid_moves() == captures
            result = engine.search(pos)
            assert result.best_move in pos.all_valid_moves()
            pos.make_move(result.best_move)
