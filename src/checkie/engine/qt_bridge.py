"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.core.position import Position
from checkie.engine.greedy import GreedySearchEngine
from checkie.engine.search import IEngine, RandomSource

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search always runs on a private copy of the requested position, so
    the host may keep its live position on the GUI thread.
    """

    best_move_ready = pyqtSignal(int, object, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine")

    def __init__(
        self,
        *,
        random_source: RandomSource | None = None,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._engine: IEngine = GreedySearchEngine(random_source, seed=seed)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, position_obj: object, request_id: int) -> None:
        """Choose a move for *position_obj* and emit the result."""
        if not isinstance(position_obj, Position):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(position_obj.copy())
        except Exception as exc:
            _LOGGER.warning("Move search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the search in progress."""
        self._cancel_event.set()
