"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from checkie.core import Position

    pos = Position()
    for move in pos.all_valid_moves():
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import GameResult, GameStyle, Player
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.rules import Rules
from checkie.core.types import (
    BOARD_SIZE,
    CELL_COUNT,
    Cell,
    cell_value,
    dark_cells,
    is_dark,
    on_board,
    parse_cell_number,
)
from checkie.core.notation import (
    SavedGame,
    SaveFormatError,
    moves_from_replay_log,
    parse_move,
    position_from_text,
    position_to_text,
    replay_log_from_moves,
)

__all__ = [
    # Enums
    "GameResult",
    "GameStyle",
    "Player",
    # Types / helpers
    "BOARD_SIZE",
    "CELL_COUNT",
    "Cell",
    "cell_value",
    "dark_cells",
    "is_dark",
    "on_board",
    "parse_cell_number",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "SavedGame",
    "SaveFormatError",
    "moves_from_replay_log",
    "parse_move",
    "position_from_text",
    "position_to_text",
    "replay_log_from_moves",
]
