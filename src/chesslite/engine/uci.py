"""UCI engine wrapper implementing the ``IEngine`` protocol.

Process management and the UCI text protocol are handled by
``chess.engine.SimpleEngine``. Positions go in as FEN strings and moves come
back as UCI strings, so nothing but :class:`Board` export and :class:`Move`
parsing is shared with the rules engine.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import chess
import chess.engine

from chesslite.core.move import Move
from chesslite.engine.search import EngineError, IEngine, SearchLimits, SearchResult

if TYPE_CHECKING:
    from types import TracebackType

    from chesslite.core.board import Board

_LOGGER = logging.getLogger(__name__)


class UciEngine(IEngine):
    """Chess engine reached over the UCI protocol.

    Args:
        command: Executable path or a full argv list.
        timeout: Seconds allowed for the handshake, option changes and
            ``quit``; searches get this on top of their move time.

    Raises:
        EngineError: The process cannot be started or the handshake fails.
    """

    __slots__ = ("_engine", "_skill_level", "_closed")

    def __init__(self, command: str | Sequence[str], *, timeout: float = 10.0) -> None:
        argv = command if isinstance(command, str) else list(command)
        self._skill_level: int | None = None
        self._closed = False

        _LOGGER.info("Starting engine: %s", argv if isinstance(argv, str) else " ".join(argv))
        try:
            self._engine = chess.engine.SimpleEngine.popen_uci(argv, timeout=timeout)
        except OSError as exc:
            raise EngineError(f"Failed to start engine {command!r}: {exc}") from exc
        except (chess.engine.EngineError, asyncio.TimeoutError) as exc:
            raise EngineError(f"Engine {command!r} failed the UCI handshake") from exc

        name = self._engine.id.get("name")
        if name:
            _LOGGER.info("Engine ready: %s", name)

    # ── Context manager ──────────────────────────────────────────────────

    def __enter__(self) -> UciEngine:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ── UCI commands ─────────────────────────────────────────────────────

    def set_skill_level(self, level: int) -> None:
        """Send ``Skill Level`` (0–20); repeated values are not re-sent."""
        if level == self._skill_level:
            return
        try:
            self._engine.configure({"Skill Level": level})
        except chess.engine.EngineTerminatedError as exc:
            raise EngineError("Engine exited while setting skill level") from exc
        except chess.engine.EngineError as exc:
            raise EngineError(f"Engine rejected skill level {level}: {exc}") from exc
        self._skill_level = level

    def search(self, board: Board, limits: SearchLimits) -> SearchResult:
        """Search *board* for ``limits.movetime_ms`` and decode the reply.

        Blocks until the engine answers. A missing, unparseable or illegal
        ``bestmove`` gives ``best_move=None``; a dead or unresponsive engine
        raises :class:`EngineError`.
        """
        if limits.skill_level is not None:
            self.set_skill_level(limits.skill_level)

        position = chess.Board(board.export_position())
        try:
            result = self._engine.play(
                position, chess.engine.Limit(time=limits.movetime_ms / 1000)
            )
        except chess.engine.EngineTerminatedError as exc:
            raise EngineError("Engine exited during search") from exc
        except asyncio.TimeoutError as exc:
            raise EngineError("Engine did not answer in time") from exc
        except chess.engine.EngineError as exc:
            _LOGGER.warning("Ignoring unusable engine reply: %s", exc)
            return SearchResult(best_move=None, raw=None)

        if result.move is None:
            return SearchResult(best_move=None, raw=None)

        raw = result.move.uci()
        move = Move.from_uci(raw)
        if move is None:
            _LOGGER.warning("Engine sent an unparseable move: %r", raw)
        _LOGGER.debug("Engine played %s", raw)
        return SearchResult(best_move=move, raw=raw)

    # ── Lifecycle ────────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return not self._closed

    def close(self) -> None:
        """Send ``quit`` and reap the process (killing it if it lingers)."""
        if self._closed:
            return
        self._closed = True
        try:
            self._engine.quit()
        except (chess.engine.EngineError, asyncio.TimeoutError):
            _LOGGER.warning("Engine did not quit cleanly; killing it")
            self._engine.close()
