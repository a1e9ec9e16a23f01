"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessclick.core.enums import PieceKind, Side

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    kind: PieceKind
    side: Side

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.kind.letter
        return letter.upper() if self.side == Side.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]

    @property
    def asset_code(self) -> str:
        """Two-letter piece-set code, e.g. ``wN`` or ``bQ``."""
        return ("w" if self.side == Side.WHITE else "b") + self.kind.letter.upper()
