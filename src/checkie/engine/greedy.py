"""One-ply greedy move selector with random tie-breaking."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from checkie.core.move import Move
from checkie.core.position import Position
from checkie.engine.search import IEngine, RandomSource, SearchResult

_LOGGER = logging.getLogger(__name__)


class GreedySearchEngine(IEngine):
    """Scores every candidate by the evaluator swing it causes for the mover.

    A candidate's score is ``value2(mover)`` after the move minus
    ``value2(mover)`` before it. The engine never looks further than the
    move itself; among the best-scoring candidates it picks one uniformly
    at random.

    Args:
        random_source: ``(n) -> int`` in ``[0, n)``. Defaults to a
            :class:`random.Random` seeded with *seed*.
        seed: Seed for the default random source.
    """

    __slots__ = ("_randrange",)

    def __init__(
        self,
        random_source: RandomSource | None = None,
        *,
        seed: int | None = None,
    ) -> None:
        if random_source is None:
            random_source = random.Random(seed).randrange
        self._randrange = random_source

    # ── Scoring ──────────────────────────────────────────────────────────

    def score_moves(self, position: Position, moves: Sequence[Move]) -> list[int]:
        mover = position.current_player
        before = position.value2(mover)
        return [position.apply_move(move).value2(mover) - before for move in moves]

    def best_moves(
        self, position: Position, moves: Sequence[Move]
    ) -> tuple[int, list[Move]]:
        """Maximal score and every candidate that reaches it, in input order."""
        scores = self.score_moves(position, moves)
        best = max(scores)
        return best, [m for m, s in zip(moves, scores) if s == best]

    # ── Selection ────────────────────────────────────────────────────────

    def choose_move(self, position: Position, moves: Sequence[Move]) -> Move:
        """Pick one of the best-scoring *moves*.

        An empty list means the game is over; the caller must check that
        first.
        """
        if not moves:
            raise ValueError("Cannot choose a move from an empty candidate list")
        _, best = self.best_moves(position, moves)
        return best[self._pick(len(best))]

    def search(self, position: Position) -> SearchResult:
        """Choose among all legal moves of the side to move."""
        moves = position.all_valid_moves()
        if not moves:
            return SearchResult(best_move=None, score=0, candidates=0, tied=0)

        score, best = self.best_moves(position, moves)
        move = best[self._pick(len(best))]
        _LOGGER.debug(
            "%s plays %s (score %+d, %d of %d tied)",
            position.current_player,
            move,
            score,
            len(best),
            len(moves),
        )
        return SearchResult(
            best_move=move,
            score=score,
            candidates=len(moves),
            tied=len(best),
        )

    def _pick(self, n: int) -> int:
        index = self._randrange(n)
        if not 0 <= index < n:
            raise ValueError(f"Random source returned {index}, expected 0..{n - 1}")
        return index
