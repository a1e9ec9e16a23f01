"""Game status derived from a snapshot."""

from __future__ import annotations

from chessclick.core.enums import Side
from chessclick.game.interfaces import GameStatus
from chessclick.rules.interfaces import RulesEngine, Snapshot


def resolve_status(engine: RulesEngine, snapshot: Snapshot) -> GameStatus:
    """Checkmate beats draw beats check."""
    if engine.is_checkmate(snapshot):
        return GameStatus.CHECKMATE
    if engine.is_draw(snapshot):
        return GameStatus.DRAW
    if engine.is_in_check(snapshot):
        return GameStatus.CHECK
    return GameStatus.IN_PROGRESS


def winner(engine: RulesEngine, snapshot: Snapshot) -> Side | None:
    """The side that delivered mate, if any."""
    if not engine.is_checkmate(snapshot):
        return None
    return engine.side_to_move(snapshot).opposite


def describe_status(engine: RulesEngine, snapshot: Snapshot) -> str:
    """One-line status text for a side panel."""
    status = resolve_status(engine, snapshot)
    turn = engine.side_to_move(snapshot)

    if status == GameStatus.CHECKMATE:
        return f"Game Over - Checkmate! {turn.opposite.display_name} wins."
    if status == GameStatus.DRAW:
        return "Game Over - Draw"

    text = f"{turn.display_name} to move"
    if status == GameStatus.CHECK:
        text += " (Check!)"
    return text
