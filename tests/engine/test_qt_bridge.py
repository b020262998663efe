"""Tests for Qt engine bridge worker."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from chesslite.core.board import Board
from chesslite.core.coordinate import E2, E4
from chesslite.core.move import Move
from chesslite.engine.qt_bridge import EngineWorker
from chesslite.engine.search import EngineError, SearchLimits, SearchResult


class _FirstMoveEngine:
    def __init__(self) -> None:
        self.calls: list[SearchLimits] = []

    def search(self, board: Board, limits: SearchLimits) -> SearchResult:
        self.calls.append(limits)
        move = board.all_legal_moves()[0]
        return SearchResult(best_move=move, raw=move.uci)


class _NoMoveEngine:
    def search(self, _board: Board, _limits: SearchLimits) -> SearchResult:
        return SearchResult(best_move=None)


class _BrokenEngine:
    def search(self, _board: Board, _limits: SearchLimits) -> SearchResult:
        raise EngineError("Engine output closed while waiting for 'bestmove'")


class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        engine = _FirstMoveEngine()
        worker = EngineWorker(engine)

        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        assert best_moves[0][1] in Board.initial().all_legal_moves()
        assert len(errors) == 0

    def test_emits_no_move_when_search_returns_none(self) -> None:
        worker = EngineWorker(_NoMoveEngine())

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_engine_failure_becomes_error_signal(self) -> None:
        worker = EngineWorker(_BrokenEngine())

        errors = QSignalSpy(worker.search_error)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Board.initial(), 5)

        assert len(errors) == 1
        assert errors[0][0] == 5
        assert "bestmove" in errors[0][1]
        assert len(best_moves) == 0

    def test_rejects_non_board(self) -> None:
        worker = EngineWorker(_FirstMoveEngine())

        errors = QSignalSpy(worker.search_error)

        worker.request_move(Move(E2, E4), 9)

        assert len(errors) == 1
        assert errors[0][1] == "Engine received invalid board"

    def test_limits_forwarded_and_updatable(self) -> None:
        engine = _FirstMoveEngine()
        worker = EngineWorker(engine, movetime_ms=250, skill_level=5)

        worker.request_move(Board.initial(), 1)
        worker.set_limits(500, 20)
        worker.request_move(Board.initial(), 2)

        assert engine.calls == [
            SearchLimits(movetime_ms=250, skill_level=5),
            SearchLimits(movetime_ms=500, skill_level=20),
        ]
        assert worker.limits == SearchLimits(movetime_ms=500, skill_level=20)
