"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.move import Move


class EngineError(RuntimeError):
    """The external engine process could not be started or stopped talking."""


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    movetime_ms: int = 1000
    skill_level: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``raw`` is the move text exactly as the engine sent it; ``best_move`` is
    ``None`` when the engine had no move or sent something unparseable.
    """

    best_move: Move | None
    raw: str | None = None


class IEngine(Protocol):
    """Protocol for chess engines used by the game layer."""

    def search(self, board: Board, limits: SearchLimits) -> SearchResult: ...
