"""Legal and pseudo-legal move generation + check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslite.core.coordinate import Coordinate
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece


# (rank_delta, file_delta); rank 0 is the far side from White.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# Per color: forward rank step, double-push start rank, promotion rank.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PAWN_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class MoveGenerator:
    """Generates moves for the pieces of a :class:`Board`.

    Legality is decided by brute force: each pseudo-legal candidate is
    applied to a copy of the board and rejected if the mover's king is then
    attacked. The board passed in is never mutated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Coordinate) -> list[Move]:
        """Strictly legal moves for the piece on *sq*.

        Empty when the square is empty or the piece does not belong to the
        side to move.
        """
        piece = self._board[sq]
        if piece is None or piece.color != self._board.side_to_move:
            return []
        return [
            move
            for move in self.pseudo_legal_moves(sq)
            if not self._leaves_king_attacked(move, piece.color)
        ]

    def all_legal_moves(self) -> list[Move]:
        """All strictly legal moves for the side to move."""
        moves: list[Move] = []
        for sq in self._board.pieces(self._board.side_to_move):
            moves.extend(self.legal_moves(sq))
        return moves

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        return any(
            self.legal_moves(sq) for sq in self._board.pieces(self._board.side_to_move)
        )

    def pseudo_legal_moves(self, sq: Coordinate) -> list[Move]:
        """Moves obeying piece geometry only (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        kind = piece.kind
        if kind == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif kind == PieceType.KNIGHT:
            self._gen_steps(sq, piece, KNIGHT_OFFSETS, moves)
        elif kind == PieceType.BISHOP:
            self._gen_sliding(sq, piece, BISHOP_DIRS, moves)
        elif kind == PieceType.ROOK:
            self._gen_sliding(sq, piece, ROOK_DIRS, moves)
        elif kind == PieceType.QUEEN:
            self._gen_sliding(sq, piece, QUEEN_DIRS, moves)
        elif kind == PieceType.KING:
            # Castling is not supported.
            self._gen_steps(sq, piece, KING_OFFSETS, moves)
        return moves

    # -- Check detection ----------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_position(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Is *sq* reachable by any pseudo-legal move of *by_color*?

        Must stay on pseudo-legal generation: the legality filter calls
        back into this method.
        """
        for from_sq in self._board.pieces(by_color):
            for move in self.pseudo_legal_moves(from_sq):
                if move.to_sq == sq:
                    return True
        return False

    def _leaves_king_attacked(self, move: Move, color: Color) -> bool:
        scratch = self._board.copy()
        scratch.make_move(move)
        return MoveGenerator(scratch).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Coordinate, piece: Piece, moves: list[Move]) -> None:
        board = self._board
        color = piece.color
        direction = _PAWN_DIRECTION[color]
        promotion_rank = _PAWN_PROMOTION_RANK[color]

        forward = sq.offset(direction, 0)
        if forward is not None and board.is_empty(forward):
            if forward.rank == promotion_rank:
                for pt in _PROMOTION_TYPES:
                    moves.append(Move(sq, forward, pt))
            else:
                moves.append(Move(sq, forward))
                if sq.rank == _PAWN_START_RANK[color]:
                    double = sq.offset(2 * direction, 0)
                    if double is not None and board.is_empty(double):
                        moves.append(Move(sq, double))

        for file_delta in (-1, 1):
            cap_sq = sq.offset(direction, file_delta)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color == color:
                    continue
                if cap_sq.rank == promotion_rank:
                    for pt in _PROMOTION_TYPES:
                        moves.append(Move(sq, cap_sq, pt))
                else:
                    moves.append(Move(sq, cap_sq))
            elif cap_sq == board.en_passant and color == board.side_to_move:
                moves.append(Move(sq, cap_sq))

    def _gen_steps(
        self,
        sq: Coordinate,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for rank_delta, file_delta in offsets:
            to_sq = sq.offset(rank_delta, file_delta)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Coordinate,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for rank_delta, file_delta in directions:
            to_sq = sq.offset(rank_delta, file_delta)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(rank_delta, file_delta)
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break
