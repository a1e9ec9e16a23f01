"""Abstract interface for the rules engine.

Follows Dependency Inversion: the game layer depends on this ABC, never
on a concrete chess library.  A snapshot is opaque to callers: they only
pass it back into the engine that produced it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from chessclick.core.enums import PieceKind, Side
    from chessclick.core.piece import Piece
    from chessclick.core.types import Square

Snapshot: TypeAlias = object


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Result of a move the engine accepted."""

    snapshot: Snapshot
    notation: str


class RulesEngine(ABC):
    """Authoritative chess state: board, turn, legality, game end.

    Implementations must never mutate a snapshot once it has been
    returned; every state change yields a new snapshot.
    """

    @abstractmethod
    def initial_snapshot(self, fen: str | None = None) -> Snapshot:
        """Starting position, or the position described by *fen*.

        Raises:
            InvalidPositionError: *fen* cannot be loaded.
        """

    @abstractmethod
    def side_to_move(self, snapshot: Snapshot) -> Side: ...

    @abstractmethod
    def piece_at(self, snapshot: Snapshot, square: Square) -> Piece | None: ...

    @abstractmethod
    def legal_destinations(
        self, snapshot: Snapshot, square: Square
    ) -> frozenset[Square]:
        """Squares the piece on *square* may legally move to.

        Empty when the square is empty, holds a piece of the side not to
        move, or the piece has no legal moves.
        """

    @abstractmethod
    def apply_move(
        self,
        snapshot: Snapshot,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> AppliedMove | None:
        """Validate and apply a move.  Returns ``None`` when illegal."""

    @abstractmethod
    def undo_last_ply(self, snapshot: Snapshot) -> Snapshot:
        """Rewind exactly one ply.

        Undefined for a snapshot with no plies behind it; callers must
        track history themselves.
        """

    @abstractmethod
    def is_in_check(self, snapshot: Snapshot) -> bool: ...

    @abstractmethod
    def is_checkmate(self, snapshot: Snapshot) -> bool: ...

    @abstractmethod
    def is_draw(self, snapshot: Snapshot) -> bool: ...

    @abstractmethod
    def is_game_over(self, snapshot: Snapshot) -> bool: ...

    @abstractmethod
    def serialize(self, snapshot: Snapshot) -> str:
        """Canonical text form (FEN); equal strings mean equal positions."""
