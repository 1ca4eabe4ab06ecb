"""GameController — the central orchestrator of a draughts game.

Coordinates: Players, GameState, move selection and the save/replay formats.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.enums import GameResult, GameStyle, Player
from checkie.core.move import Move
from checkie.core.notation import moves_from_replay_log, position_from_text, position_to_text
from checkie.core.position import Position
from checkie.engine.search import IEngine, RandomSource
from checkie.game.interfaces import GamePhase, GameSettings, IGameController, IPlayer
from checkie.game.opening import random_opening
from checkie.game.player import players_for_style
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, "GameState"], None]  # move, notation, state
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns, prompts
    computer players, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). AI results arrive via ``submit_move``, which an
    ``EngineWorker`` reaches through a queued signal/slot connection.
    """

    __slots__ = (
        "_state",
        "_players",
        "_settings",
        "_random_source",
        "events",
    )

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._state = GameState()
        self._players: dict[Player, IPlayer] = {}
        self._settings = GameSettings()
        self._random_source = random_source if random_source is not None else random.randrange
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.phase == GamePhase.NOT_STARTED:
            return None
        return self._players.get(self._state.side_to_move)

    def player(self, side: Player) -> IPlayer | None:
        return self._players.get(side)

    @property
    def game_style(self) -> GameStyle:
        above = self._players.get(Player.ABOVE)
        below = self._players.get(Player.BELOW)
        return GameStyle.from_sides(
            above is not None and not above.is_human,
            below is not None and not below.is_human,
        )

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        above: IPlayer,
        below: IPlayer,
        settings: GameSettings | None = None,
        position: Position | None = None,
    ) -> None:
        self._cancel_thinking()
        self._players = {Player.ABOVE: above, Player.BELOW: below}
        if settings is None:
            settings = GameSettings(
                allow_multi_capture=position.allow_multi_capture if position is not None else True
            )
        self._settings = settings

        self._state = GameState()
        if position is not None:
            position = position.copy()
            position.allow_multi_capture = self._settings.allow_multi_capture
            position.update_status()
        self._state.setup(position, self._settings.allow_multi_capture)

        for move in random_opening(
            self._state.position, self._settings.opening_plies, self._random_source
        ):
            self._state.apply_move(move)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        # Validate legality the way an interactive drop is validated
        position = self._state.position
        piece = position.piece_at(move.origin)
        if piece is None:
            return False
        legal = position.is_valid_capture(piece, move.destination) or (
            not position.has_capture and position.is_valid_move(piece, move.destination)
        )
        if not legal:
            return False

        record = self._state.apply_move(move)
        self._emit_move(move, record.notation)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        # Same side again while a capture chain continues
        self._prompt_current_player()
        return True

    def play_engine_move(self, engine: IEngine) -> Move | None:
        """Let *engine* choose and submit one leg for the side to move.

        Returns the submitted move, or ``None`` when the game is over.
        """
        if self._state.is_game_over:
            return None
        result = engine.search(self._state.position)
        if result.best_move is None:
            return None
        if not self.submit_move(result.best_move):
            raise RuntimeError(f"Engine produced an illegal move: {result.best_move}")
        return result.best_move

    def replay(self, log: str) -> None:
        """Replace the current game with the one recorded in *log*.

        Every leg is checked against the legal moves of a fresh game; on the
        first illegal leg a ``ValueError`` is raised and the current game is
        kept.
        """
        moves = moves_from_replay_log(log)
        scratch = GameState()
        scratch.setup(allow_multi_capture=self._settings.allow_multi_capture)
        for index, move in enumerate(moves):
            if scratch.is_game_over or move not in scratch.legal_moves():
                _LOGGER.warning("Replay rejected at leg #%d: %s", index + 1, move)
                raise ValueError(f"Illegal replay leg #{index + 1}: {move}")
            scratch.apply_move(move)

        self._cancel_thinking()
        self._state = scratch
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    # ── Save / load ──────────────────────────────────────────────────────

    def save_text(self) -> str:
        """Current position in the saved-game format."""
        return position_to_text(self._state.position, self.game_style)

    def load_game(
        self,
        text: str,
        on_request_move: Callable[[Position], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> GameStyle:
        """Start a game from saved text with players built for its style.

        Raises ``SaveFormatError`` without touching the current game when
        the text is malformed.
        """
        try:
            saved = position_from_text(text)
        except ValueError as exc:
            _LOGGER.warning("Could not load saved game: %s", exc)
            raise
        above, below = players_for_style(saved.game_style, on_request_move, on_cancel)
        settings = GameSettings(allow_multi_capture=saved.position.allow_multi_capture)
        self.new_game(above, below, settings, position=saved.position)
        return saved.game_style

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.position)

    def _cancel_thinking(self) -> None:
        if self._state.phase != GamePhase.THINKING:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()

    def _emit_move(self, move: Move, notation: str) -> None:
        for cb in self.events.on_move:
            cb(move, notation, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s after %d legs", result.name, self._state.ply_count)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
