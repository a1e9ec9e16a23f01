"""MoveExecutor validates a move through the rules engine and commits it."""

from __future__ import annotations

import logging

from chessclick.core.enums import PieceKind, Side
from chessclick.core.types import Square
from chessclick.game.interfaces import IllegalMove, LastMove, MoveRecord
from chessclick.rules.interfaces import RulesEngine, Snapshot

_LOGGER = logging.getLogger(__name__)


class MoveExecutor:
    """Owns the current snapshot and the last-move highlight.

    Snapshot and last move are only ever replaced together, by
    :meth:`submit`, :meth:`restore` or :meth:`reset`.
    """

    __slots__ = ("_engine", "_snapshot", "_last_move", "_auto_promotion")

    def __init__(
        self,
        engine: RulesEngine,
        snapshot: Snapshot,
        auto_promotion: PieceKind = PieceKind.QUEEN,
    ) -> None:
        self._engine = engine
        self._snapshot = snapshot
        self._last_move: LastMove | None = None
        self._auto_promotion = auto_promotion

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def last_move(self) -> LastMove | None:
        return self._last_move

    # ── Commands ─────────────────────────────────────────────────────────

    def submit(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> MoveRecord | IllegalMove:
        """Apply a move if legal.

        A pawn reaching the last rank without an explicit *promotion*
        becomes the auto-promotion piece; a *promotion* given for any
        other move is dropped.  An illegal move leaves everything as it
        was and comes back as :class:`IllegalMove`.
        """
        promotion = self._resolve_promotion(from_sq, to_sq, promotion)
        applied = self._engine.apply_move(self._snapshot, from_sq, to_sq, promotion)
        if applied is None:
            illegal = IllegalMove(from_sq, to_sq, promotion)
            _LOGGER.debug("Rejected %s", illegal)
            return illegal

        record = MoveRecord(from_sq, to_sq, promotion, applied.notation)
        self._snapshot = applied.snapshot
        self._last_move = record.endpoints
        return record

    def restore(self, snapshot: Snapshot, last_move: LastMove | None) -> None:
        """Replace snapshot and last move, e.g. after an undo."""
        self._snapshot = snapshot
        self._last_move = last_move

    def reset(self, snapshot: Snapshot) -> None:
        self.restore(snapshot, None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve_promotion(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None,
    ) -> PieceKind | None:
        piece = self._engine.piece_at(self._snapshot, from_sq)
        if piece is None or piece.kind != PieceKind.PAWN:
            return None
        last_rank = 7 if piece.side == Side.WHITE else 0
        if to_sq.rank != last_rank:
            return None
        return promotion if promotion is not None else self._auto_promotion
