"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.enums import GameResult, Player
from checkie.core.move import Move
from checkie.core.notation import replay_log_from_moves
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single executed leg in the move history."""

    move: Move
    notation: str
    player: Player
    was_capture: bool = False
    was_promotion: bool = False
    chain_continues: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, move history.

    This is a pure data/logic class — no threading, no UI.
    """

    position: Position = field(default_factory=Position, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        position: Position | None = None,
        allow_multi_capture: bool = True,
    ) -> None:
        """Initialise (or reset) the game, from the start or a loaded position."""
        if position is None:
            position = Position(allow_multi_capture=allow_multi_capture)
        self.position = position
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply one validated leg and return the history record.

        Caller is responsible for legality check.
        """
        player = self.position.current_player
        notation = move.notation
        self.position.make_move(move)

        record = MoveRecord(
            move=move,
            notation=notation,
            player=player,
            was_capture=move.is_capture,
            was_promotion=self.position.just_promoted,
            chain_continues=self.position.current_player == player,
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Player:
        return self.position.current_player

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of executed legs."""
        return len(self.move_history)

    @property
    def replay_log(self) -> str:
        """Space-separated notation of every executed leg."""
        return replay_log_from_moves(r.move for r in self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return self.position.all_valid_moves()

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.position)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
