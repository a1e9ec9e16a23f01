"""GameSession — the orchestrator of one interactive game.

Coordinates: SelectionController, MoveExecutor, HistoryTracker and the
status/projection functions.  Emits events via simple callbacks so the
UI / tests can subscribe.  Sessions are plain objects; any number may
coexist.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from chessclick.core.enums import PieceKind, Side
from chessclick.core.types import Square
from chessclick.game.executor import MoveExecutor
from chessclick.game.history import HistoryTracker
from chessclick.game.interfaces import (
    ClickResult,
    GameStatus,
    IllegalMove,
    LastMove,
    MoveRecord,
    SelectionState,
    SessionSettings,
)
from chessclick.game.projector import Cell, CellMarks, mark_cells, project_board
from chessclick.game.selection import SelectionController
from chessclick.game.status import describe_status, resolve_status
from chessclick.rules.interfaces import RulesEngine, Snapshot
from chessclick.rules.python_chess import PythonChessEngine

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionState], None]
MoveCallback = Callable[[MoveRecord], None]  # accepted move
UndoCallback = Callable[[MoveRecord], None]  # the record taken back
StatusCallback = Callable[[GameStatus], None]
ResetCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One game: board clicks in, snapshots, history and status out.

    Every command runs to completion under a re-entrant lock, so at most
    one move application is in flight per session.  Listeners run inside
    that lock and may read the session freely.

    Args:
        engine: Rules engine; defaults to :class:`PythonChessEngine`.
        settings: Starting position and auto-promotion piece.
    """

    __slots__ = (
        "_engine",
        "_settings",
        "_lock",
        "_executor",
        "_history",
        "_selection",
        "events",
    )

    def __init__(
        self,
        engine: RulesEngine | None = None,
        settings: SessionSettings | None = None,
    ) -> None:
        self._engine = engine if engine is not None else PythonChessEngine()
        self._settings = settings if settings is not None else SessionSettings()
        self._lock = threading.RLock()
        self._executor = MoveExecutor(
            self._engine,
            self._engine.initial_snapshot(self._settings.start_fen),
            auto_promotion=self._settings.auto_promotion,
        )
        self._history = HistoryTracker(self._engine)
        self._selection = SelectionController(
            self._engine,
            self._apply_move,
            promotion=self._settings.auto_promotion,
        )
        self.events = SessionEvents()
        _LOGGER.info("New game from %s", self.fen)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> RulesEngine:
        return self._engine

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def snapshot(self) -> Snapshot:
        return self._executor.snapshot

    @property
    def fen(self) -> str:
        return self._engine.serialize(self._executor.snapshot)

    @property
    def side_to_move(self) -> Side:
        return self._engine.side_to_move(self._executor.snapshot)

    @property
    def selection(self) -> SelectionState:
        return self._selection.state

    @property
    def status(self) -> GameStatus:
        return resolve_status(self._engine, self._executor.snapshot)

    @property
    def status_text(self) -> str:
        return describe_status(self._engine, self._executor.snapshot)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return self._history.records

    @property
    def move_rows(self) -> list[tuple[int, str, str | None]]:
        return self._history.move_rows()

    @property
    def last_move(self) -> LastMove | None:
        return self._executor.last_move

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def cells(self) -> tuple[Cell, ...]:
        return project_board(self._engine, self._executor.snapshot)

    @property
    def marks(self) -> dict[Square, CellMarks]:
        return mark_cells(self.cells, self._selection.state, self._executor.last_move)

    # ── Commands ─────────────────────────────────────────────────────────

    def handle_square_click(self, square: Square | str) -> ClickResult:
        """Feed one board click through the selection state machine."""
        if isinstance(square, str):
            square = Square.parse(square)

        with self._lock:
            status_before = self.status
            selection_before = self._selection.state
            moves_before = len(self._history)

            result = self._selection.click(
                self._executor.snapshot,
                square,
                locked=status_before.is_terminal,
            )
            if result in (ClickResult.IGNORED, ClickResult.LOCKED):
                _LOGGER.debug("Click on %s %s", square, result.name.lower())

            if self._selection.state != selection_before:
                self._emit_selection()
            if len(self._history) > moves_before:
                self._emit_move(self._history.records[-1], status_before)
            return result

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> MoveRecord | IllegalMove:
        """Submit a move directly (e.g. from a bot), bypassing clicks.

        Any pending selection is cleared.  A finished game refuses every
        move.
        """
        with self._lock:
            status_before = self.status
            if status_before.is_terminal:
                return IllegalMove(from_sq, to_sq, promotion)

            outcome = self._apply_move(from_sq, to_sq, promotion)
            self._clear_selection()
            if isinstance(outcome, MoveRecord):
                self._emit_move(outcome, status_before)
            return outcome

    def undo(self) -> bool:
        """Take back the last ply.  Returns False when there is none."""
        with self._lock:
            status_before = self.status
            rewind = self._history.undo(self._executor.snapshot)
            if rewind is None:
                return False

            self._executor.restore(rewind.snapshot, rewind.last_move)
            self._clear_selection()
            for cb in self.events.on_undo:
                cb(rewind.undone)
            self._emit_status_if_changed(status_before)
            return True

    def reset(self) -> None:
        """Start over from the configured starting position."""
        with self._lock:
            status_before = self.status
            snapshot = self._engine.initial_snapshot(self._settings.start_fen)
            self._executor.reset(snapshot)
            self._history.clear()
            self._clear_selection()
            _LOGGER.info("Game reset to %s", self.fen)
            for cb in self.events.on_reset:
                cb()
            self._emit_status_if_changed(status_before)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None,
    ) -> MoveRecord | IllegalMove:
        """Commit snapshot, last move and history entry as one unit."""
        outcome = self._executor.submit(from_sq, to_sq, promotion)
        if isinstance(outcome, MoveRecord):
            self._history.append(outcome)
        return outcome

    def _clear_selection(self) -> None:
        if self._selection.state.is_idle:
            return
        self._selection.clear()
        self._emit_selection()

    def _emit_selection(self) -> None:
        state = self._selection.state
        for cb in self.events.on_selection_changed:
            cb(state)

    def _emit_move(self, record: MoveRecord, status_before: GameStatus) -> None:
        _LOGGER.debug("Played %s (%s)", record.notation, record.uci)
        for cb in self.events.on_move:
            cb(record)
        self._emit_status_if_changed(status_before)

    def _emit_status_if_changed(self, status_before: GameStatus) -> None:
        status = self.status
        if status == status_before:
            return
        for cb in self.events.on_status_changed:
            cb(status)
