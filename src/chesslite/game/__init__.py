"""Game management layer — modes, engine settings and the session.

Quick start::

    from chesslite.game import Difficulty, GameMode, GameSession

    session = GameSession()
    session.new_game(GameMode.VS_ENGINE, difficulty=Difficulty.EASY)
    with session.open_engine() as engine:
        ...
"""

from chesslite.game.interfaces import Difficulty, GameMode, GamePhase
from chesslite.game.session import GameSession, MoveRecord, SessionEvents
from chesslite.game.settings import EngineSettings

__all__ = [
    # Enums
    "Difficulty",
    "GameMode",
    "GamePhase",
    # Concrete
    "EngineSettings",
    "GameSession",
    "MoveRecord",
    "SessionEvents",
]
