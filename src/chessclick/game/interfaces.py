"""Value types shared by the game layer.

Everything here is immutable: components replace these values
wholesale instead of editing them in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessclick.core.enums import PieceKind
from chessclick.core.types import Square

# ── Status ───────────────────────────────────────────────────────────────────


class GameStatus(IntEnum):
    """Discrete game status derived from a snapshot."""

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    DRAW = auto()

    @property
    def is_terminal(self) -> bool:
        """Board input is refused in a terminal status."""
        return self in (GameStatus.CHECKMATE, GameStatus.DRAW)


class ClickResult(IntEnum):
    """Which transition a square click triggered."""

    IGNORED = auto()  # idle click on an empty or opponent square
    SELECTED = auto()
    DESELECTED = auto()  # clicked the selected square again
    RESELECTED = auto()  # switched to another own piece
    MOVED = auto()
    REJECTED = auto()  # move delegated but refused by the engine
    CANCELLED = auto()
    LOCKED = auto()  # game over, input refused


# ── Selection ────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class SelectionState:
    """Selected square plus its legal destinations."""

    selected: Square | None = None
    hints: frozenset[Square] = field(default_factory=frozenset)

    @property
    def is_idle(self) -> bool:
        return self.selected is None


IDLE = SelectionState()


# ── Moves ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LastMove:
    """Endpoints of the most recently accepted move."""

    from_sq: Square
    to_sq: Square

    def touches(self, square: Square) -> bool:
        return square in (self.from_sq, self.to_sq)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    promotion: PieceKind | None
    notation: str

    @property
    def endpoints(self) -> LastMove:
        return LastMove(self.from_sq, self.to_sq)

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation, e.g. ``e7e8q``."""
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base


@dataclass(frozen=True, slots=True)
class IllegalMove:
    """A move the rules engine refused.  Returned, never raised."""

    from_sq: Square
    to_sq: Square
    promotion: PieceKind | None = None

    def __str__(self) -> str:
        promo = self.promotion.letter if self.promotion is not None else ""
        return f"illegal move {self.from_sq}{self.to_sq}{promo}"


# ── Settings ─────────────────────────────────────────────────────────────────


@dataclass
class SessionSettings:
    """User-configurable session options."""

    # Position the session starts from and returns to on reset
    start_fen: str | None = None

    # Piece a pawn becomes on the last rank when no choice is given
    auto_promotion: PieceKind = PieceKind.QUEEN

    def __post_init__(self) -> None:
        if self.auto_promotion in (PieceKind.PAWN, PieceKind.KING):
            raise ValueError(f"Cannot promote to {self.auto_promotion}")
