"""Piece state object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Player
from checkie.core.types import Cell

# Save-format code <-> owner
_CODE_MAP: dict[str, Player] = {
    "A": Player.ABOVE,
    "B": Player.BELOW,
}
_OWNER_CODES: dict[Player, str] = {v: k for k, v in _CODE_MAP.items()}
_KING_SUFFIX = "K"


@dataclass(slots=True)
class Piece:
    """A draughts piece: owner, current cell and king flag.

    The piece knows where it stands but not which board holds it. Only the
    owning :class:`~checkie.core.board.Board` relocates it.
    """

    player: Player
    row: int
    col: int
    king: bool = False

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.col)

    @property
    def should_be_king(self) -> bool:
        """True when a plain piece stands on its promotion row."""
        return not self.king and self.row == self.player.promotion_row

    def make_king(self) -> None:
        self.king = True

    def place(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def copy(self) -> Piece:
        return Piece(self.player, self.row, self.col, self.king)

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def code(self) -> str:
        """Save-format code: ``A``/``B`` plus ``K`` for kings."""
        code = _OWNER_CODES[self.player]
        return code + _KING_SUFFIX if self.king else code

    @classmethod
    def from_code(cls, code: str, row: int, col: int) -> Piece:
        """Create a piece standing on (row, col) from its save-format code."""
        if not (1 <= len(code) <= 2) or code[0] not in _CODE_MAP:
            raise ValueError(f"Invalid piece code: {code!r}")
        if len(code) == 2 and code[1] != _KING_SUFFIX:
            raise ValueError(f"Invalid piece code: {code!r}")
        return cls(_CODE_MAP[code[0]], row, col, king=len(code) == 2)

    def __str__(self) -> str:
        return self.code
