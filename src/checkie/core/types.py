"""Cell value type and coordinate helpers.

Board layout (row 0 at the top, ``ABOVE``'s home side)::

    row 0:  .  1  .  2  .  3  .  4
    row 1:  5  .  6  .  7  .  8  .
    ...
    row 7: 29  . 30  . 31  . 32  .

Only dark cells (``(row + col)`` odd) are playable; they carry the 1-based
cell numbers used by the textual notation.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8
CELL_COUNT = 32


def on_board(row: int, col: int) -> bool:
    """Whether (row, col) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(row: int, col: int) -> bool:
    """Dark cells are the only ones a piece may ever occupy."""
    return (row + col) % 2 == 1


def cell_value(row: int, col: int) -> int:
    """Positional weight 1-4, highest on the board edge."""
    if row in (0, 7) or col in (0, 7):
        return 4
    if row in (1, 6) or col in (1, 6):
        return 3
    if row in (2, 5) or col in (2, 5):
        return 2
    return 1


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable (row, col) coordinate."""

    row: int
    col: int

    @property
    def value(self) -> int:
        return cell_value(self.row, self.col)

    @property
    def is_dark(self) -> bool:
        return is_dark(self.row, self.col)

    @property
    def on_board(self) -> bool:
        return on_board(self.row, self.col)

    @property
    def cell_number(self) -> int:
        """1-based dark-cell number used by the move notation."""
        return self.row * 4 + self.col // 2 + 1

    @classmethod
    def from_cell_number(cls, number: int) -> Cell:
        """Inverse of :attr:`cell_number`, e.g. 1 -> (0,1), 32 -> (7,6)."""
        if not (1 <= number <= CELL_COUNT):
            raise ValueError(f"Cell number out of range 1-{CELL_COUNT}: {number!r}")
        row = (number - 1) // 4
        col = 2 * (number - 4 * row - 1)
        if row % 2 == 0:
            col += 1
        return cls(row, col)

    def offset(self, d_row: int, d_col: int) -> Cell:
        return Cell(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def dark_cells() -> Iterator[Cell]:
    """All 32 dark cells in row-major order (cell numbers 1..32)."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if is_dark(row, col):
                yield Cell(row, col)


def parse_cell_number(text: str) -> Cell:
    """Parse a decimal cell number, e.g. ``'22'`` -> (5,2)."""
    if not text.isdigit():
        raise ValueError(f"Invalid cell number: {text!r}")
    try:
        number = int(text)
    except ValueError:
        raise ValueError(f"Invalid cell number: {text!r}") from None
    return Cell.from_cell_number(number)
