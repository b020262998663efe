"""Board — piece placement plus the game state needed to apply moves."""

from __future__ import annotations

from chesslite.core.coordinate import Coordinate
from chesslite.core.enums import Color, GameStatus, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.piece import Piece
from chesslite.core.rules import Rules

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class IllegalMoveError(ValueError):
    """Raised when a move is applied from a square that holds no piece."""


class Board:
    """Mutable 64-square board with side to move, captures and en passant.

    Squares are stored in a flat list indexed by :attr:`Coordinate.index`.
    :meth:`copy` returns a fully independent board, which is what the
    legality filter relies on to simulate candidate moves.
    """

    __slots__ = ("_squares", "side_to_move", "ply_count", "captured", "en_passant")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.side_to_move = Color.WHITE
        self.ply_count = 0
        self.captured: list[Piece] = []
        self.en_passant: Coordinate | None = None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for file in range(8):
            b[Coordinate(1, file)] = Piece(PieceType.PAWN, Color.BLACK)
            b[Coordinate(6, file)] = Piece(PieceType.PAWN, Color.WHITE)
        for file, kind in enumerate(_BACK_RANK):
            b[Coordinate(0, file)] = Piece(kind, Color.BLACK)
            b[Coordinate(7, file)] = Piece(kind, Color.WHITE)
        return b

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Coordinate) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Coordinate, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def is_empty(self, sq: Coordinate) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Coordinate]:
        """Squares occupied by *color*, a8 first."""
        return [
            Coordinate.from_index(i)
            for i, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def king_position(self, color: Color) -> Coordinate | None:
        for i, piece in enumerate(self._squares):
            if piece is not None and piece.kind == PieceType.KING and piece.color == color:
                return Coordinate.from_index(i)
        return None

    def legal_moves(self, sq: Coordinate) -> list[Move]:
        """Fully legal moves for the piece on *sq* (empty if not its turn)."""
        return MoveGenerator(self).legal_moves(sq)

    def all_legal_moves(self) -> list[Move]:
        return MoveGenerator(self).all_legal_moves()

    def has_legal_move(self) -> bool:
        return MoveGenerator(self).has_legal_move()

    def is_in_check(self, color: Color) -> bool:
        return MoveGenerator(self).is_in_check(color)

    def status(self) -> GameStatus:
        return Rules.classify(self)

    def export_position(self) -> str:
        """FEN string for handing the position to an external engine."""
        from chesslite.core.notation.fen import position_to_fen

        return position_to_fen(self)

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, move: Move) -> None:
        """Apply *move* in place and pass the turn.

        Callers are expected to pass moves taken from :meth:`legal_moves`;
        no legality check happens here.
        """
        piece = self[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.from_sq}")

        target = self[move.to_sq]
        if target is not None:
            self.captured.append(target)

        # En passant: the captured pawn sits beside the origin, not on to_sq
        if piece.kind == PieceType.PAWN and move.to_sq == self.en_passant:
            ep_capture_sq = Coordinate(move.from_sq.rank, move.to_sq.file)
            ep_captured = self[ep_capture_sq]
            if ep_captured is not None:
                self.captured.append(ep_captured)
                self[ep_capture_sq] = None

        self.en_passant = None
        if piece.kind == PieceType.PAWN and abs(move.from_sq.rank - move.to_sq.rank) == 2:
            self.en_passant = Coordinate(
                (move.from_sq.rank + move.to_sq.rank) // 2, move.from_sq.file
            )

        placed = piece.moved()
        if move.promotion is not None:
            placed = piece.promoted(move.promotion)

        self[move.from_sq] = None
        self[move.to_sq] = placed

        self.side_to_move = self.side_to_move.opposite
        self.ply_count += 1

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b.side_to_move = self.side_to_move
        b.ply_count = self.ply_count
        b.captured = self.captured.copy()
        b.en_passant = self.en_passant
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.side_to_move == other.side_to_move
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file]
                row.append(str(p) if p else ".")
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
