"""Qt bridge that turns session callbacks into signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessclick.core.types import Square
from chessclick.game.interfaces import GameStatus, MoveRecord, SelectionState
from chessclick.game.session import GameSession


class SessionBridge(QObject):
    """Exposes a :class:`GameSession` to Qt widgets.

    Widgets forward clicks to :meth:`click` and redraw on the signals;
    they never hold game state of their own.

    Signals:
        selection_changed(SelectionState)
        move_made(MoveRecord)
        move_undone(MoveRecord)
        status_changed(GameStatus, str): status and its display text.
        board_changed(): the snapshot was replaced; re-read ``cells``.
    """

    selection_changed = pyqtSignal(object)
    move_made = pyqtSignal(object)
    move_undone = pyqtSignal(object)
    status_changed = pyqtSignal(object, str)
    board_changed = pyqtSignal()

    __slots__ = ("_session",)

    def __init__(self, session: GameSession, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        events = session.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_move.append(self._on_move)
        events.on_undo.append(self._on_undo)
        events.on_status_changed.append(self._on_status_changed)
        events.on_reset.append(self._on_reset)

    @property
    def session(self) -> GameSession:
        return self._session

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(str)
    def click(self, square_name: str) -> None:
        self._session.handle_square_click(Square.parse(square_name))

    @pyqtSlot()
    def undo(self) -> None:
        self._session.undo()

    @pyqtSlot()
    def new_game(self) -> None:
        self._session.reset()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_selection_changed(self, state: SelectionState) -> None:
        self.selection_changed.emit(state)

    def _on_move(self, record: MoveRecord) -> None:
        self.move_made.emit(record)
        self.board_changed.emit()

    def _on_undo(self, record: MoveRecord) -> None:
        self.move_undone.emit(record)
        self.board_changed.emit()

    def _on_status_changed(self, status: GameStatus) -> None:
        self.status_changed.emit(status, self._session.status_text)

    def _on_reset(self) -> None:
        self.board_changed.emit()
