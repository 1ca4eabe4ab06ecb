"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from checkie.core.enums import GameStyle, Player
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.position import Position


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Player, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Player:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, position: Position) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An AI participant that delegates computation to a callback.

    ``AIPlayer`` only stores a reference to a *bridge* callable that will
    be invoked on ``request_move``. In an interactive host this callable
    dispatches work to an ``EngineWorker`` running in a ``QThread``; a
    headless driver can leave it unset and call
    ``GameController.play_engine_move`` itself.

    Args:
        side: Side the AI plays.
        name: Display name.
        on_request_move: ``(Position) -> None`` — called when the game
            controller asks the AI to start thinking. Called again for
            every further leg of a capture chain.
        on_cancel: ``() -> None`` — called to abort a running search.
    """

    __slots__ = ("_side", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        side: Player,
        name: str = "Computer",
        on_request_move: Callable[[Position], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._side = side
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def side(self) -> Player:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, position: Position) -> None:
        if self._on_request_move is not None:
            self._on_request_move(position)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()


def players_for_style(
    style: GameStyle,
    on_request_move: Callable[[Position], None] | None = None,
    on_cancel: Callable[[], None] | None = None,
) -> tuple[IPlayer, IPlayer]:
    """Build the ``(above, below)`` participants a game style describes."""
    players: list[IPlayer] = []
    for side in (Player.ABOVE, Player.BELOW):
        if style.is_computer(side):
            players.append(AIPlayer(side, on_request_move=on_request_move, on_cancel=on_cancel))
        else:
            players.append(HumanPlayer(side))
    return players[0], players[1]
