"""SelectionController — the click-driven selection state machine.

States are ``Idle`` (nothing selected) and ``PieceSelected(square)``.
A click on one of the current hints is handed to a move submitter; the
controller itself never touches the snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chessclick.core.enums import PieceKind
from chessclick.core.types import Square
from chessclick.game.interfaces import (
    IDLE,
    ClickResult,
    IllegalMove,
    MoveRecord,
    SelectionState,
)
from chessclick.rules.interfaces import RulesEngine, Snapshot

_LOGGER = logging.getLogger(__name__)

MoveSubmitter = Callable[[Square, Square, PieceKind | None], MoveRecord | IllegalMove]


class SelectionController:
    """Owns :class:`SelectionState` and applies click transitions.

    Args:
        engine: Rules engine used for piece lookups and hints.
        submit: Called with ``(from_sq, to_sq, promotion)`` when a click
            lands on a hint.
        promotion: Promotion piece sent with every delegated move.
    """

    __slots__ = ("_engine", "_submit", "_promotion", "_state")

    def __init__(
        self,
        engine: RulesEngine,
        submit: MoveSubmitter,
        promotion: PieceKind = PieceKind.QUEEN,
    ) -> None:
        self._engine = engine
        self._submit = submit
        self._promotion = promotion
        self._state = IDLE

    @property
    def state(self) -> SelectionState:
        return self._state

    def clear(self) -> None:
        """Drop back to ``Idle``."""
        self._state = IDLE

    def click(
        self, snapshot: Snapshot, square: Square, *, locked: bool = False
    ) -> ClickResult:
        """Apply one click on *square* against *snapshot*.

        With *locked* set (game over) every click is refused and the
        controller stays ``Idle``.
        """
        if locked:
            self._state = IDLE
            return ClickResult.LOCKED

        selected = self._state.selected

        if selected is not None and square == selected:
            self._state = IDLE
            return ClickResult.DESELECTED

        if self._is_own_piece(snapshot, square):
            self._select(snapshot, square)
            return ClickResult.SELECTED if selected is None else ClickResult.RESELECTED

        if selected is None:
            return ClickResult.IGNORED

        if square not in self._state.hints:
            self._state = IDLE
            return ClickResult.CANCELLED

        outcome = self._submit(selected, square, self._promotion)
        self._state = IDLE
        if isinstance(outcome, IllegalMove):
            # Hints came from the engine, so this means they went stale.
            _LOGGER.debug("Hinted move refused: %s", outcome)
            return ClickResult.REJECTED
        return ClickResult.MOVED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _is_own_piece(self, snapshot: Snapshot, square: Square) -> bool:
        piece = self._engine.piece_at(snapshot, square)
        return piece is not None and piece.side == self._engine.side_to_move(snapshot)

    def _select(self, snapshot: Snapshot, square: Square) -> None:
        hints = self._engine.legal_destinations(snapshot, square)
        self._state = SelectionState(square, hints)
