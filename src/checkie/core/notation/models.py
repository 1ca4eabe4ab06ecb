"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkie.core.enums import GameStyle
    from checkie.core.position import Position


@dataclass(slots=True)
class SavedGame:
    """Structured save-file payload used by the game load path."""

    position: Position
    game_style: GameStyle


class SaveFormatError(ValueError):
    """Malformed save data.

    ``row`` and ``col`` name the board cell being read when the error
    occurred; both are ``None`` for the trailing player/style/rule fields.
    """

    def __init__(self, message: str, row: int | None = None, col: int | None = None) -> None:
        if row is not None and col is not None:
            message = f"{message} (at ({row},{col}))"
        super().__init__(message)
        self.row = row
        self.col = col
