"""GameSession — orchestrates a game between humans and/or a UCI engine.

Coordinates: Board, Rules, engine requests.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from chesslite.core.board import Board
from chesslite.core.enums import Color, GameStatus
from chesslite.core.move import Move
from chesslite.core.notation import position_from_fen, position_to_fen
from chesslite.engine.search import IEngine, SearchLimits
from chesslite.engine.uci import UciEngine
from chesslite.game.interfaces import Difficulty, GameMode, GamePhase
from chesslite.game.settings import EngineSettings

if TYPE_CHECKING:
    from chesslite.core.coordinate import Coordinate
    from chesslite.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    uci: str
    fen_after: str
    status: GameStatus
    captured: Piece | None = None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[GameStatus], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Runs one game: validates human moves, hands engine turns to an
    :class:`IEngine` and tracks history and game-over state.

    Single-threaded: when an engine search runs on a worker thread, its reply
    must be delivered back to :meth:`apply_engine_reply` on the owning thread.
    """

    __slots__ = (
        "_board",
        "_mode",
        "_human_color",
        "_settings",
        "_phase",
        "_status",
        "_history",
        "events",
    )

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings if settings is not None else EngineSettings()
        self._board = Board.initial()
        self._mode = GameMode.TWO_PLAYER
        self._human_color = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._status = GameStatus.IN_PROGRESS
        self._history: list[MoveRecord] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def human_color(self) -> Color:
        return self._human_color

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def side_to_move(self) -> Color:
        return self._board.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def is_engine_turn(self) -> bool:
        return (
            self._mode == GameMode.VS_ENGINE
            and not self.is_game_over
            and self._board.side_to_move != self._human_color
        )

    # ── Game setup ───────────────────────────────────────────────────────

    def new_game(
        self,
        mode: GameMode = GameMode.TWO_PLAYER,
        human_color: Color = Color.WHITE,
        difficulty: Difficulty | None = None,
        fen: str | None = None,
    ) -> None:
        """Initialise (or reset) the game."""
        self._board = position_from_fen(fen) if fen else Board.initial()
        self._mode = mode
        self._human_color = human_color
        if difficulty is not None:
            self._settings = replace(self._settings, difficulty=difficulty)
        self._history.clear()
        self._status = self._board.status()
        _LOGGER.info(
            "New %s game, human plays %s, difficulty %s",
            mode.name.lower(),
            human_color,
            self._settings.difficulty.name.lower(),
        )

        if self._status.is_terminal:
            self._set_phase(GamePhase.GAME_OVER)
            self._emit_game_over()
        else:
            self._set_phase(GamePhase.AWAITING_MOVE)

    def open_engine(self) -> UciEngine:
        """Start the configured UCI engine; the caller owns and closes it."""
        return UciEngine(
            self._settings.engine_path,
            timeout=self._settings.timeout_s,
        )

    # ── Human moves ──────────────────────────────────────────────────────

    def legal_moves(self, sq: Coordinate) -> list[Move]:
        """Legal moves from *sq* for a human, empty when input is not accepted."""
        if self._phase != GamePhase.AWAITING_MOVE or self.is_engine_turn:
            return []
        return self._board.legal_moves(sq)

    def submit_move(self, move: Move) -> bool:
        """Apply a human move. Returns True if legal and applied."""
        if move not in self.legal_moves(move.from_sq):
            return False
        self._apply(move)
        return True

    # ── Engine moves ─────────────────────────────────────────────────────

    def search_limits(self) -> SearchLimits:
        return SearchLimits(
            movetime_ms=self._settings.movetime_ms,
            skill_level=self._settings.difficulty.skill_level,
        )

    def begin_engine_turn(self) -> Board | None:
        """Mark the engine as thinking and return a board copy to search.

        ``None`` when it is not the engine's turn.
        """
        if not self.is_engine_turn or self._phase != GamePhase.AWAITING_MOVE:
            return None
        self._set_phase(GamePhase.THINKING)
        return self._board.copy()

    def apply_engine_reply(self, uci: str | None) -> bool:
        """Apply the engine's ``bestmove`` text.

        Unparseable or illegal replies are logged and ignored; the session
        goes back to awaiting a move so the engine can be asked again.
        """
        if not self.is_engine_turn:
            _LOGGER.warning("Ignoring engine reply %r: not the engine's turn", uci)
            return False

        move = Move.from_uci(uci) if uci else None
        if move is None:
            _LOGGER.warning("Ignoring unparseable engine reply: %r", uci)
            self._set_phase(GamePhase.AWAITING_MOVE)
            return False

        if move not in self._board.legal_moves(move.from_sq):
            _LOGGER.warning("Ignoring illegal engine move %s", move)
            self._set_phase(GamePhase.AWAITING_MOVE)
            return False

        self._apply(move)
        return True

    def play_engine_turn(self, engine: IEngine) -> bool:
        """Run one blocking engine search and apply its reply."""
        board = self.begin_engine_turn()
        if board is None:
            return False
        try:
            result = engine.search(board, self.search_limits())
        except Exception:
            self.cancel_engine_turn()
            raise
        return self.apply_engine_reply(result.raw)

    def cancel_engine_turn(self) -> None:
        """Leave THINKING after a failed search so the engine can be asked again."""
        if self._phase == GamePhase.THINKING:
            _LOGGER.warning("Engine search failed; awaiting a new request")
            self._set_phase(GamePhase.AWAITING_MOVE)

    # ── Internal ─────────────────────────────────────────────────────────

    def _apply(self, move: Move) -> MoveRecord:
        captured_before = len(self._board.captured)
        self._board.make_move(move)
        captured = (
            self._board.captured[-1]
            if len(self._board.captured) > captured_before
            else None
        )

        self._status = self._board.status()
        record = MoveRecord(
            move=move,
            uci=move.uci,
            fen_after=position_to_fen(self._board),
            status=self._status,
            captured=captured,
        )
        self._history.append(record)
        _LOGGER.debug("Played %s -> %s", record.uci, self._status.name)

        for cb in self.events.on_move:
            cb(record)

        if self._status.is_terminal:
            self._set_phase(GamePhase.GAME_OVER)
            self._emit_game_over()
        else:
            self._set_phase(GamePhase.AWAITING_MOVE)
        return record

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_game_over(self) -> None:
        _LOGGER.info("Game over: %s", self._status.name.lower())
        for cb in self.events.on_game_over:
            cb(self._status)
