"""Square value type and coordinate helpers.

Indices follow the Little-Endian Rank-File mapping::

    a1=0, b1=1, ..., h1=7
    a2=8, ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

from chessclick.core.enums import SquareColor
from chessclick.core.errors import InvalidSquareError

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate.

    Args:
        file: File index 0–7 (a–h).
        rank: Rank index 0–7 (1–8).
    """

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise InvalidSquareError(
                f"Square out of range: file={self.file}, rank={self.rank}"
            )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise InvalidSquareError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a 0–63 index (a1=0, h8=63)."""
        if not 0 <= index < 64:
            raise InvalidSquareError(f"Square index out of range: {index}")
        return cls(index & 7, index >> 3)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'e4'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    @property
    def file_name(self) -> str:
        return _FILES[self.file]

    @property
    def rank_name(self) -> str:
        return _RANKS[self.rank]

    @property
    def color(self) -> SquareColor:
        """a1 is dark, h1 is light."""
        if (self.file + self.rank) % 2 == 0:
            return SquareColor.DARK
        return SquareColor.LIGHT

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name!r})"


def parse_square(name: str) -> Square:
    """Shorthand for :meth:`Square.parse`."""
    return Square.parse(name)


ALL_SQUARES: tuple[Square, ...] = tuple(Square.from_index(i) for i in range(64))
