"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from checkie.core.enums import Player
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Cell, is_dark, on_board

_HOME_ROWS = 3


class Board:
    """Mutable 8x8 grid where each cell holds at most one piece.

    Light cells stay empty. A piece object is referenced by exactly one cell.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Piece | None:
        """Piece at (row, col); ``None`` when empty or off the board."""
        if not on_board(row, col):
            return None
        return self._cells[row][col]

    def set(self, row: int, col: int, piece: Piece | None) -> None:
        if piece is not None and not is_dark(row, col):
            raise ValueError(f"Pieces may only stand on dark cells: {Cell(row, col)}")
        self._cells[row][col] = piece

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self.get(cell.row, cell.col)

    def __setitem__(self, cell: Cell, piece: Piece | None) -> None:
        self.set(cell.row, cell.col, piece)

    def is_empty(self, row: int, col: int) -> bool:
        """Whether (row, col) is on the board and holds no piece."""
        return on_board(row, col) and self._cells[row][col] is None

    def place(self, piece: Piece) -> Piece:
        """Put *piece* on the cell it reports and return it."""
        self.set(piece.row, piece.col, piece)
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, player: Player | None = None) -> Iterator[Piece]:
        """Pieces in row-major order, optionally only *player*'s."""
        for row in self._cells:
            for piece in row:
                if piece is not None and (player is None or piece.player == player):
                    yield piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent copy; every piece is copied as well."""
        b = Board()
        b._cells = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._cells
        ]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting placement: 12 pieces a side, middle rows empty."""
        b = cls()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if not is_dark(row, col):
                    continue
                if row < _HOME_ROWS:
                    b.set(row, col, Piece(Player.ABOVE, row, col))
                elif row >= BOARD_SIZE - _HOME_ROWS:
                    b.set(row, col, Piece(Player.BELOW, row, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._cells):
            marks = []
            for piece in row:
                if piece is None:
                    marks.append(".")
                else:
                    mark = "a" if piece.player == Player.ABOVE else "b"
                    marks.append(mark.upper() if piece.king else mark)
            rows.append(f"{r} {' '.join(marks)}")
        rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        return "\n".join(rows)
