"""Core enumerations for the click-to-move domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def display_name(self) -> str:
        """Capitalised name used in status lines, e.g. ``White``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Lower-case letter, e.g. ``q`` for a queen (as in UCI promotions)."""
        return _LETTERS[self]

    def __str__(self) -> str:
        return self.name.lower()


_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}


class SquareColor(IntEnum):
    """Shade of a board square."""

    LIGHT = 0
    DARK = 1

    def __str__(self) -> str:
        return self.name.lower()
