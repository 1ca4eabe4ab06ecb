"""Saved-game text format: parsing and serialization.

One line per dark cell in row-major order, then three trailer lines::

    1 A
    2 AK
    ...
    32 N
    Black
    Player-vs-Computer
    true
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from checkie.core.board import Board
from checkie.core.enums import GameStyle, Player
from checkie.core.notation.models import SavedGame, SaveFormatError
from checkie.core.piece import Piece
from checkie.core.position import Position
from checkie.core.types import dark_cells

EMPTY_CODE = "N"
_BOOL_TOKENS: dict[str, bool] = {"true": True, "false": False}


def position_to_text(position: Position, game_style: GameStyle) -> str:
    """Serialise *position* (and the game style it is played under)."""
    lines: list[str] = []
    for cell in dark_cells():
        piece = position.piece_at(cell)
        code = piece.code if piece is not None else EMPTY_CODE
        lines.append(f"{cell.cell_number} {code}")
    lines.append(position.current_player.label)
    lines.append(game_style.label)
    lines.append("true" if position.allow_multi_capture else "false")
    return "\n".join(lines) + "\n"


def position_from_text(text: str) -> SavedGame:
    """Parse saved-game text into a fresh :class:`Position`.

    Pieces are read into a scratch board; the position is only built once
    every token has parsed, so a failed load never yields a partial board.
    """
    tokens = iter(text.split())
    board = Board()

    # 1. Board cells
    for cell in dark_cells():
        number = next(tokens, None)
        if number is None:
            raise SaveFormatError("Missing cell number", cell.row, cell.col)
        try:
            matches = number.isdigit() and int(number) == cell.cell_number
        except ValueError:
            matches = False
        if not matches:
            raise SaveFormatError(
                f"Expected cell number {cell.cell_number}, got {number!r}",
                cell.row,
                cell.col,
            )
        code = next(tokens, None)
        if code is None:
            raise SaveFormatError("Missing piece code", cell.row, cell.col)
        if code == EMPTY_CODE:
            continue
        try:
            piece = Piece.from_code(code, cell.row, cell.col)
        except ValueError as exc:
            raise SaveFormatError(str(exc), cell.row, cell.col) from exc
        if piece.should_be_king:
            raise SaveFormatError(
                f"Uncrowned piece {code!r} on its promotion row", cell.row, cell.col
            )
        board[cell] = piece

    # 2. Side to move
    label = _next_field(tokens, "current player")
    try:
        player = Player.from_label(label)
    except ValueError as exc:
        raise SaveFormatError(str(exc)) from exc

    # 3. Game style
    label = _next_field(tokens, "game style")
    try:
        game_style = GameStyle.from_label(label)
    except ValueError as exc:
        raise SaveFormatError(str(exc)) from exc

    # 4. Multi-capture rule
    flag = _next_field(tokens, "multi-capture flag")
    allow_multi_capture = _BOOL_TOKENS.get(flag.lower())
    if allow_multi_capture is None:
        raise SaveFormatError(f"Invalid multi-capture flag: {flag!r}")

    extra = next(tokens, None)
    if extra is not None:
        raise SaveFormatError(f"Unexpected trailing data: {extra!r}")

    position = Position(board, player, allow_multi_capture)
    return SavedGame(position=position, game_style=game_style)


def _next_field(tokens: Iterator[str], name: str) -> str:
    token = next(tokens, None)
    if token is None:
        raise SaveFormatError(f"Missing {name}")
    return token


# ── Files ────────────────────────────────────────────────────────────────────


def save_game_file(path: str | Path, position: Position, game_style: GameStyle) -> None:
    """Write *position* to *path* in the saved-game format."""
    Path(path).write_text(position_to_text(position, game_style), encoding="utf-8")


def load_game_file(path: str | Path) -> SavedGame:
    """Read a saved game from *path*."""
    return position_from_text(Path(path).read_text(encoding="utf-8"))
