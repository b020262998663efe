"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslite.core.board import Board
from chesslite.engine.search import IEngine, SearchLimits


class EngineWorker(QObject):
    """Thread-affine worker that asks an engine for moves on demand.

    Searches block until the engine answers, so the worker is meant to be
    moved to its own ``QThread``; results come back through queued signals.
    """

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(
        self,
        engine: IEngine,
        *,
        movetime_ms: int = 1000,
        skill_level: int | None = None,
    ) -> None:
        super().__init__()
        self._engine = engine
        self._limits = SearchLimits(movetime_ms=movetime_ms, skill_level=skill_level)

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Search for the best move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(board_obj, self._limits)
        except Exception as exc:
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move)

    @pyqtSlot(int, int)
    def set_limits(self, movetime_ms: int, skill_level: int) -> None:
        """Update search limits (takes effect on the next search)."""
        self._limits = SearchLimits(movetime_ms=movetime_ms, skill_level=skill_level)
