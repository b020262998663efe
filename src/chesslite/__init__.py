"""chesslite — a compact chess rules engine with a UCI engine bridge."""

__version__ = "0.1.0"
