"""High-level rule queries: result and winner detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from checkie.core.enums import GameResult, Player

if TYPE_CHECKING:
    from checkie.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def is_forced_capture(position: Position) -> bool:
        """Whether the side to move is restricted to captures."""
        return bool(position.all_valid_captures())

    @staticmethod
    def is_capture_chain(position: Position) -> bool:
        """Whether the side to move is mid-way through a multi-capture."""
        return position.double_capture_available()

    @staticmethod
    def winner(position: Position) -> Player | None:
        """The side that moved last wins once the side to move is stuck."""
        if not position.game_over:
            return None
        return position.current_player.opposite

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        winner = Rules.winner(position)
        if winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.win_for(winner)
