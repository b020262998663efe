"""Coordinate value object and algebraic helpers.

Board layout (row-major, White at the bottom):
    rank 0 = row "8" (a8 .. h8)
    ...
    rank 7 = row "1" (a1 .. h1)

``index`` linearises a coordinate as ``rank * 8 + file`` so a8=0, h1=63.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A square on the 8x8 board."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < 8 and 0 <= self.file < 8):
            raise ValueError(f"Coordinate out of range: ({self.rank}, {self.file})")

    # ── Arithmetic ───────────────────────────────────────────────────────

    def offset(self, rank_delta: int, file_delta: int) -> Coordinate | None:
        """Shifted coordinate, or ``None`` if it would leave the board."""
        rank = self.rank + rank_delta
        file = self.file + file_delta
        if 0 <= rank < 8 and 0 <= file < 8:
            return Coordinate(rank, file)
        return None

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @classmethod
    def from_index(cls, index: int) -> Coordinate:
        return cls(index >> 3, index & 7)

    @classmethod
    def all(cls) -> Iterator[Coordinate]:
        """All 64 coordinates, a8 first."""
        for index in range(64):
            yield cls.from_index(index)

    # ── Algebraic notation ───────────────────────────────────────────────

    @property
    def algebraic(self) -> str:
        """Human-readable name, e.g. ``Coordinate(4, 4)`` → ``'e4'``."""
        return _FILES[self.file] + str(8 - self.rank)

    @classmethod
    def from_algebraic(cls, name: str) -> Coordinate | None:
        """Parse a square name like ``'e4'``; malformed input gives ``None``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            return None
        return cls(8 - int(name[1]), _FILES.index(name[0]))

    def __str__(self) -> str:
        return self.algebraic


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(7, f) for f in range(8))
