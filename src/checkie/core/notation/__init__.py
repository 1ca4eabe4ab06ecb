"""Notation package: saved-game text, move notation and replay logs."""

from checkie.core.notation.models import SavedGame, SaveFormatError
from checkie.core.notation.replay import (
    load_replay_file,
    move_to_notation,
    moves_from_replay_log,
    parse_move,
    replay_log_from_moves,
    save_replay_file,
)
from checkie.core.notation.save import (
    EMPTY_CODE,
    load_game_file,
    position_from_text,
    position_to_text,
    save_game_file,
)

__all__ = [
    "EMPTY_CODE",
    "SavedGame",
    "SaveFormatError",
    "position_from_text",
    "position_to_text",
    "save_game_file",
    "load_game_file",
    "move_to_notation",
    "parse_move",
    "replay_log_from_moves",
    "moves_from_replay_log",
    "save_replay_file",
    "load_replay_file",
]
