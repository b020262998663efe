"""Engine-related settings for a game session."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.game.interfaces import Difficulty


@dataclass
class EngineSettings:
    """All user-configurable engine settings."""

    # Process
    engine_path: str = "stockfish"
    timeout_s: float = 10.0

    # Search
    movetime_ms: int = 1000
    difficulty: Difficulty = Difficulty.MEDIUM
