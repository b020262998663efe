"""FEN parsing and serialization.

The exporter is partial: castling is never available and the
halfmove clock is always ``0``. UCI engines accept such strings, which is
all the export is used for.
"""

from __future__ import annotations

from chesslite.core.board import Board
from chesslite.core.coordinate import Coordinate
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"

_CASTLING_CHARS = frozenset("KQkq")


def position_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`.

    The castling field is validated but ignored. Clocks are optional.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Coordinate(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling (no castling support, only checked for well-formedness)
    if castling_part != "-" and (
        not set(castling_part) <= _CASTLING_CHARS
        or len(set(castling_part)) != len(castling_part)
    ):
        raise ValueError(f"Invalid FEN castling field: {castling_part!r}")

    # 4. En passant
    ep: Coordinate | None = None
    if ep_part != "-":
        ep = Coordinate.from_algebraic(ep_part)
        if ep is None:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        expected_ep_rank = 2 if side == Color.WHITE else 5
        if ep.rank != expected_ep_rank:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional). The halfmove clock is checked, then dropped.
    if len(parts) > 4 and int(parts[4]) < 0:
        raise ValueError(f"Invalid FEN halfmove clock: {parts[4]!r}")

    if len(parts) > 5:
        fullmove = int(parts[5])
        if fullmove < 1:
            raise ValueError(f"Invalid FEN fullmove number: {parts[5]!r}")
    else:
        fullmove = 1

    # 7. Exactly one king per side
    for color in Color:
        kings = sum(
            1
            for sq in board.pieces(color)
            if board[sq] == Piece(PieceType.KING, color)
        )
        if kings != 1:
            raise ValueError(f"Invalid FEN: {color} must have exactly one king: {fen!r}")

    board.side_to_move = side
    board.en_passant = ep
    board.ply_count = 2 * (fullmove - 1) + (1 if side == Color.BLACK else 0)
    return board


def position_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(8):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Coordinate(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if board.side_to_move == Color.WHITE else "b"

    # 3–4. Castling is never available; en passant as tracked
    ep_str = board.en_passant.algebraic if board.en_passant is not None else "-"

    # 5–6. Halfmove clock is not tracked
    fullmove = board.ply_count // 2 + 1

    return f"{board_str} {side_str} - {ep_str} 0 {fullmove}"
