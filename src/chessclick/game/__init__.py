"""Game layer — selection, move execution, history, status, projection.

Quick start::

    from chessclick.game import GameSession

    session = GameSession()
    session.handle_square_click("e2")
    session.handle_square_click("e4")
    print(session.status_text)  # "Black to move"
"""

from chessclick.game.executor import MoveExecutor
from chessclick.game.history import HistoryTracker, Rewind
from chessclick.game.interfaces import (
    IDLE,
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
from chessclick.game.session import GameSession, SessionEvents
from chessclick.game.status import describe_status, resolve_status, winner

__all__ = [
    # Value types
    "IDLE",
    "Cell",
    "CellMarks",
    "ClickResult",
    "GameStatus",
    "IllegalMove",
    "LastMove",
    "MoveRecord",
    "Rewind",
    "SelectionState",
    "SessionSettings",
    # Components
    "GameSession",
    "HistoryTracker",
    "MoveExecutor",
    "SelectionController",
    "SessionEvents",
    # Pure functions
    "describe_status",
    "mark_cells",
    "project_board",
    "resolve_status",
    "winner",
]
