"""Random openings ("three-move" games)."""

from __future__ import annotations

import random

from checkie.core.move import Move
from checkie.core.position import Position
from checkie.engine.search import RandomSource


def random_opening(
    position: Position,
    plies: int = 3,
    random_source: RandomSource | None = None,
) -> list[Move]:
    """Pick *plies* random legal legs starting from *position*.

    Works on a copy; the returned moves are meant to be replayed through
    the game state so they land in the move history.
    """
    randrange = random_source if random_source is not None else random.randrange
    scratch = position.copy()
    moves: list[Move] = []
    for _ in range(plies):
        legal = scratch.all_valid_moves()
        if not legal or scratch.game_over:
            break
        move = legal[randrange(len(legal))]
        scratch.make_move(move)
        moves.append(move)
    return moves
