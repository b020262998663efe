"""Enumerations shared by the game layer."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # engine is computing
    GAME_OVER = auto()


# ── Game setup ───────────────────────────────────────────────────────────────


class GameMode(IntEnum):
    """Who plays the two sides."""

    TWO_PLAYER = auto()
    VS_ENGINE = auto()


class Difficulty(IntEnum):
    """Engine strength presets."""

    EASY = auto()
    MEDIUM = auto()
    HARD = auto()

    @property
    def skill_level(self) -> int:
        """UCI ``Skill Level`` option value (0–20)."""
        return _SKILL_LEVELS[self]


_SKILL_LEVELS: dict[Difficulty, int] = {
    Difficulty.EASY: 5,
    Difficulty.MEDIUM: 15,
    Difficulty.HARD: 20,
}
