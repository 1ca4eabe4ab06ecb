"""Position — complete game state (board + turn metadata) and all rule logic."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Player
from checkie.core.move import Move
from checkie.core.piece import Piece
from checkie.core.types import Cell, dark_cells

# Direction classes, in the order moves are generated.
_TOWARD_ROW_0: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1))
_TOWARD_ROW_7: tuple[tuple[int, int], ...] = ((1, -1), (1, 1))
_ALL_DIRS: tuple[tuple[int, int], ...] = _TOWARD_ROW_0 + _TOWARD_ROW_7

# Evaluator weights
MAN_VALUE = 3
KING_VALUE = 5
CAPTURE_BONUS = 20


def _directions(piece: Piece) -> tuple[tuple[int, int], ...]:
    if piece.king:
        return _ALL_DIRS
    return _TOWARD_ROW_0 if piece.player.forward < 0 else _TOWARD_ROW_7


class Position:
    """Full draughts position: board, side to move, capture and game-over state.

    Mutating operations (:meth:`move`, :meth:`next_turn`, :meth:`make_move`)
    keep the invariants below; :meth:`apply_move` is the pure variant that
    works on a copy.

    * ``has_capture`` matches "the side to move has a capture" after every
      turn switch, and when it is true only captures are legal.
    * ``game_over`` is true exactly when the side to move has no move and no
      capture.
    * a piece is crowned the moment it reaches its promotion row.
    """

    __slots__ = (
        "board",
        "current_player",
        "has_capture",
        "game_over",
        "last_capturing_piece",
        "allow_multi_capture",
        "just_promoted",
    )

    def __init__(
        self,
        board: Board | None = None,
        current_player: Player = Player.BELOW,
        allow_multi_capture: bool = True,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.current_player = current_player
        self.allow_multi_capture = allow_multi_capture
        self.last_capturing_piece: Piece | None = None
        self.just_promoted = False
        self.has_capture = False
        self.game_over = True
        self.update_status()

    @classmethod
    def empty(cls, current_player: Player = Player.BELOW) -> Position:
        """Position with no pieces; it is over until pieces are placed."""
        return cls(Board(), current_player)

    def new_game(self) -> None:
        """Reset to the starting placement with ``BELOW`` to move."""
        self.board = Board.initial()
        self.current_player = Player.BELOW
        self.last_capturing_piece = None
        self.just_promoted = False
        self.update_status()

    # ── Element access ───────────────────────────────────────────────────

    def get(self, row: int, col: int) -> Piece | None:
        return self.board.get(row, col)

    def piece_at(self, cell: Cell) -> Piece | None:
        return self.board[cell]

    def _is_enemy(self, row: int, col: int, player: Player) -> bool:
        piece = self.board.get(row, col)
        return piece is not None and piece.player != player

    def _owns(self, piece: Piece) -> bool:
        """Whether *piece* is the live piece standing on its own cell."""
        return self.board.get(piece.row, piece.col) is piece

    # ── Generation ───────────────────────────────────────────────────────

    def _captures_for(self, piece: Piece) -> list[Move]:
        origin = piece.cell
        captures: list[Move] = []
        for d_row, d_col in _directions(piece):
            if self._is_enemy(
                piece.row + d_row, piece.col + d_col, piece.player
            ) and self.board.is_empty(piece.row + 2 * d_row, piece.col + 2 * d_col):
                captures.append(Move(origin, origin.offset(2 * d_row, 2 * d_col)))
        return captures

    def _steps_for(self, piece: Piece) -> list[Move]:
        origin = piece.cell
        return [
            Move(origin, origin.offset(d_row, d_col))
            for d_row, d_col in _directions(piece)
            if self.board.is_empty(piece.row + d_row, piece.col + d_col)
        ]

    def valid_captures(self, row: int, col: int) -> list[Move]:
        """Captures for the piece on (row, col) if it belongs to the side to move."""
        piece = self.board.get(row, col)
        if piece is None or piece.player != self.current_player:
            return []
        return self._captures_for(piece)

    def valid_moves(self, row: int, col: int) -> list[Move]:
        """Simple steps for the piece on (row, col) if it belongs to the side to move."""
        piece = self.board.get(row, col)
        if piece is None or piece.player != self.current_player:
            return []
        return self._steps_for(piece)

    def all_valid_captures(self) -> list[Move]:
        """Every capture of the side to move, in row-major board order.

        During a capture chain only the chaining piece may capture.
        """
        chaining = self.last_capturing_piece
        if chaining is not None and self.double_capture_available():
            return self.valid_captures(chaining.row, chaining.col)
        captures: list[Move] = []
        for cell in dark_cells():
            captures.extend(self.valid_captures(cell.row, cell.col))
        return captures

    def all_valid_moves(self) -> list[Move]:
        """Legal moves for the side to move; captures only, when any exist."""
        captures = self.all_valid_captures()
        if captures:
            return captures
        moves: list[Move] = []
        for cell in dark_cells():
            moves.extend(self.valid_moves(cell.row, cell.col))
        return moves

    def has_lost(self) -> bool:
        """True when the side to move has neither a step nor a capture."""
        for piece in self.board.pieces(self.current_player):
            if self._steps_for(piece) or self._captures_for(piece):
                return False
        return True

    # ── Point queries (interactive input) ────────────────────────────────

    def is_valid_move(self, piece: Piece, cell: Cell) -> bool:
        """Whether *piece* may step to *cell*. Does not apply forced capture."""
        if not self._owns(piece) or piece.player != self.current_player:
            return False
        if self.double_capture_available():
            return False
        return Move(piece.cell, cell) in self._steps_for(piece)

    def is_valid_capture(self, piece: Piece, cell: Cell) -> bool:
        """Whether *piece* may capture by jumping to *cell*.

        While a chain is in progress only the piece that just captured may
        capture again.
        """
        if self.double_capture_available() and piece is not self.last_capturing_piece:
            return False
        if not self._owns(piece) or piece.player != self.current_player:
            return False
        return Move(piece.cell, cell) in self._captures_for(piece)

    # ── Core move operations ─────────────────────────────────────────────

    def move(self, piece: Piece, dest_row: int, dest_col: int) -> None:
        """Relocate *piece* without any legality check or turn switch.

        A two-row displacement removes the jumped piece and records *piece*
        as the last capturing piece. Reaching the promotion row crowns it.
        """
        self.just_promoted = False
        self.board.set(piece.row, piece.col, None)
        if abs(piece.row - dest_row) == 2:
            self._capture(piece, dest_row, dest_col)
        piece.place(dest_row, dest_col)
        self.board.set(dest_row, dest_col, piece)
        if piece.should_be_king:
            piece.make_king()
            self.just_promoted = True

    def _capture(self, piece: Piece, dest_row: int, dest_col: int) -> None:
        self.last_capturing_piece = piece
        self.board.set((piece.row + dest_row) // 2, (piece.col + dest_col) // 2, None)

    def make_move(self, move: Move) -> None:
        """Apply *move* and pass the turn unless the capture chain continues."""
        piece = self.board[move.origin]
        if piece is None:
            raise ValueError(f"No piece on {move.origin}")
        self.move(piece, move.destination.row, move.destination.col)
        if not self.double_capture_available():
            self.next_turn()

    def apply_move(self, move: Move) -> Position:
        """Return the position after *move*; this position is left unchanged."""
        pos = self.copy()
        pos.make_move(move)
        return pos

    def double_capture_available(self) -> bool:
        """Whether the piece that just captured must (and may) capture again.

        Promotion ends the turn even when another jump would be possible.
        """
        piece = self.last_capturing_piece
        if not self.allow_multi_capture or piece is None or self.just_promoted:
            return False
        return bool(self.valid_captures(piece.row, piece.col))

    def next_turn(self) -> None:
        """Hand the move to the other side and refresh capture/game-over state."""
        self.last_capturing_piece = None
        self.current_player = self.current_player.opposite
        self.update_status()

    def update_status(self) -> None:
        """Recompute ``has_capture`` and ``game_over`` for the side to move."""
        self.has_capture = bool(self.all_valid_captures())
        self.game_over = not self.has_capture and self.has_lost()

    # ── Evaluation ───────────────────────────────────────────────────────

    def value(self, player: Player) -> int:
        """Material plus edge-weighted placement of *player*'s pieces.

        Each piece scores its cell value plus 3 (man) or 5 (king); a piece
        with a legal capture adds 20 for the side to move and costs 20
        otherwise.
        """
        total = 0
        for piece in self.board.pieces(player):
            total += piece.cell.value
            total += KING_VALUE if piece.king else MAN_VALUE
            if self.valid_captures(piece.row, piece.col):
                if player == self.current_player:
                    total += CAPTURE_BONUS
                else:
                    total -= CAPTURE_BONUS
        return total

    def value2(self, player: Player) -> int:
        """Signed score difference from *player*'s point of view."""
        return self.value(player) - self.value(player.opposite)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent copy; pieces are copied, never shared."""
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.current_player = self.current_player
        pos.allow_multi_capture = self.allow_multi_capture
        pos.just_promoted = self.just_promoted
        pos.has_capture = self.has_capture
        pos.game_over = self.game_over
        pos.last_capturing_piece = None
        if self.last_capturing_piece is not None:
            pos.last_capturing_piece = pos.board[self.last_capturing_piece.cell]
        return pos

    def pieces(self, player: Player) -> list[Piece]:
        return list(self.board.pieces(player))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.current_player == other.current_player
            and self.allow_multi_capture == other.allow_multi_capture
            and self.has_capture == other.has_capture
            and self.game_over == other.game_over
            and self.just_promoted == other.just_promoted
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.current_player} to move"
