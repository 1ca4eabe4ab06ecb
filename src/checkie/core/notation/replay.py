"""Move notation and replay logs.

A move is written ``"<from>-<to>"`` in cell numbers. A replay log is the
space-separated sequence of every executed leg, so each jump of a
multi-capture appears on its own.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from checkie.core.move import Move


def move_to_notation(move: Move) -> str:
    """``Move`` -> ``'22-18'``."""
    return move.notation


def parse_move(token: str) -> Move:
    """``'22-18'`` -> ``Move``; both numbers must lie in 1..32."""
    return Move.from_notation(token.strip())


def replay_log_from_moves(moves: Iterable[Move]) -> str:
    """Join executed legs into a replay log."""
    return " ".join(move_to_notation(m) for m in moves)


def moves_from_replay_log(log: str) -> list[Move]:
    """Split a replay log back into moves. Extra whitespace is ignored."""
    moves: list[Move] = []
    for index, token in enumerate(log.split()):
        try:
            moves.append(parse_move(token))
        except ValueError as exc:
            raise ValueError(f"Invalid replay token #{index + 1}: {exc}") from exc
    return moves


def save_replay_file(path: str | Path, moves: Iterable[Move]) -> None:
    Path(path).write_text(replay_log_from_moves(moves), encoding="utf-8")


def load_replay_file(path: str | Path) -> list[Move]:
    return moves_from_replay_log(Path(path).read_text(encoding="utf-8"))
