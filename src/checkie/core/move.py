"""Move value object (cell-number notation)."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Cell, parse_cell_number


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: the piece standing on *origin* goes to *destination*.

    The origin cell is the handle of the moving piece inside whichever
    position the move is applied to, so one move can be replayed on copies.
    """

    origin: Cell
    destination: Cell

    @property
    def is_capture(self) -> bool:
        return abs(self.destination.row - self.origin.row) == 2

    @property
    def jumped(self) -> Cell | None:
        """Cell of the captured piece, or ``None`` for a simple step."""
        if not self.is_capture:
            return None
        return Cell(
            (self.origin.row + self.destination.row) // 2,
            (self.origin.col + self.destination.col) // 2,
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.origin.cell_number}-{self.destination.cell_number}"

    @property
    def notation(self) -> str:
        """Cell-number notation, e.g. ``'22-18'``."""
        return str(self)

    @classmethod
    def from_notation(cls, token: str) -> Move:
        parts = token.split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid move notation: {token!r}")
        return cls(parse_cell_number(parts[0]), parse_cell_number(parts[1]))
