"""Core domain layer — squares, pieces and enums shared by every package.

Quick start::

    from chessclick.core import Piece, PieceKind, Side, parse_square

    e4 = parse_square("e4")
    knight = Piece(PieceKind.KNIGHT, Side.WHITE)
"""

from chessclick.core.enums import PieceKind, Side, SquareColor
from chessclick.core.errors import (
    ChessClickError,
    InvalidPositionError,
    InvalidSquareError,
)
from chessclick.core.piece import Piece
from chessclick.core.types import ALL_SQUARES, Square, parse_square

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    "SquareColor",
    # Errors
    "ChessClickError",
    "InvalidPositionError",
    "InvalidSquareError",
    # Value objects
    "ALL_SQUARES",
    "Piece",
    "Square",
    "parse_square",
]
