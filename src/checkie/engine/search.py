"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.core.position import Position

# Returns an integer in [0, n) for a given n.
RandomSource = Callable[[int], int]


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    candidates: int
    tied: int


class IEngine(Protocol):
    """Protocol for move selectors used by the game layer."""

    def choose_move(self, position: Position, moves: Sequence[Move]) -> Move: ...

    def search(self, position: Position) -> SearchResult: ...
