"""Game management layer — controller, players, state machine.

Quick start::

    from checkie.core import Player
    from checkie.engine import GreedySearchEngine
    from checkie.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        above=AIPlayer(Player.ABOVE),
        below=HumanPlayer(Player.BELOW, "Alice"),
    )
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import (
    GamePhase,
    GameSettings,
    IGameController,
    IPlayer,
)
from checkie.game.opening import random_opening
from checkie.game.player import AIPlayer, HumanPlayer, players_for_style
from checkie.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "GameSettings",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "players_for_style",
    "random_opening",
]
