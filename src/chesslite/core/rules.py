"""High-level chess rules: check, checkmate and stalemate classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslite.core.enums import GameStatus
from chesslite.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesslite.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: no draw claims of any kind. Repetition, the fifty-move
    # rule and insufficient material are never detected.

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return MoveGenerator(board).is_in_check(board.side_to_move)

    @staticmethod
    def classify(board: Board) -> GameStatus:
        """Status of the side to move, recomputed from scratch."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(board.side_to_move)
        has_move = gen.has_legal_move()

        if not has_move:
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        if in_check:
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        return Rules.classify(board) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        return Rules.classify(board) == GameStatus.STALEMATE

    @staticmethod
    def is_game_over(board: Board) -> bool:
        return Rules.classify(board).is_terminal
