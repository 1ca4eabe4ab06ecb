"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Player

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.core.position import Position


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


# ── Settings ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Rule options chosen when a game starts.

    Args:
        allow_multi_capture: Let a piece keep jumping within one turn.
        opening_plies: Random legal moves played before the players take
            over (3 gives the "three-move" opening).
    """

    allow_multi_capture: bool = True
    opening_plies: int = 0

    @classmethod
    def three_move(cls, allow_multi_capture: bool = True) -> GameSettings:
        return cls(allow_multi_capture=allow_multi_capture, opening_plies=3)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def side(self) -> Player: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, position: Position) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this hands the position to the move selector.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for human)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        above: IPlayer,
        below: IPlayer,
        settings: GameSettings | None = None,
        position: Position | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit one leg of a move. Returns True if legal and applied."""

    @abstractmethod
    def replay(self, log: str) -> None:
        """Replace the game with the one recorded in a replay log."""
