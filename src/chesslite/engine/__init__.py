"""Chess engine package: UCI subprocess client and Qt worker bridge."""

from chesslite.engine.qt_bridge import EngineWorker
from chesslite.engine.search import EngineError, IEngine, SearchLimits, SearchResult
from chesslite.engine.uci import UciEngine

__all__ = [
    "EngineError",
    "EngineWorker",
    "IEngine",
    "SearchLimits",
    "SearchResult",
    "UciEngine",
]
