"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslite.core import Board, Coordinate

    board = Board.initial()
    for move in board.legal_moves(Coordinate.from_algebraic("e2")):
        print(move)
"""

from chesslite.core.board import Board, IllegalMoveError
from chesslite.core.coordinate import Coordinate
from chesslite.core.enums import Color, GameStatus, PieceType
from chesslite.core.move import Move
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chesslite.core.piece import Piece
from chesslite.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Domain objects
    "Board",
    "Coordinate",
    "IllegalMoveError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
