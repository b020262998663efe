"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.coordinate import Coordinate
from chesslite.core.enums import PieceType

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_MAP: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Coordinate
    to_sq: Coordinate
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq.algebraic}{self.to_sq.algebraic}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, uci: str) -> Move | None:
        """Parse ``'e2e4'`` / ``'e7e8q'``; anything malformed gives ``None``."""
        if len(uci) not in (4, 5):
            return None

        from_sq = Coordinate.from_algebraic(uci[0:2])
        to_sq = Coordinate.from_algebraic(uci[2:4])
        if from_sq is None or to_sq is None:
            return None

        promotion: PieceType | None = None
        if len(uci) == 5:
            promotion = _PROMO_MAP.get(uci[4].lower())
            if promotion is None:
                return None

        return cls(from_sq, to_sq, promotion)
