"""Tests for status resolution and status text."""

import pytest

from chessclick.core.enums import Side
from chessclick.core.types import parse_square
from chessclick.game.interfaces import GameStatus
from chessclick.game.status import describe_status, resolve_status, winner
from chessclick.rules.python_chess import PythonChessEngine
from positions import BLACK_IN_CHECK_FEN, FOOLS_MATE, STALEMATE_FEN


def _fools_mate(engine: PythonChessEngine):
    snapshot = engine.initial_snapshot()
    for from_name, to_name in FOOLS_MATE:
        applied = engine.apply_move(
            snapshot, parse_square(from_name), parse_square(to_name)
        )
        assert applied is not None
        snapshot = applied.snapshot
    return snapshot


class TestResolveStatus:
    def test_in_progress(self, engine: PythonChessEngine) -> None:
        snapshot = engine.initial_snapshot()
        assert resolve_status(engine, snapshot) == GameStatus.IN_PROGRESS

    def test_check(self, engine: PythonChessEngine) -> None:
        snapshot = engine.initial_snapshot(BLACK_IN_CHECK_FEN)
        assert resolve_status(engine, snapshot) == GameStatus.CHECK

    def test_checkmate_beats_check(self, engine: PythonChessEngine) -> None:
        assert resolve_status(engine, _fools_mate(engine)) == GameStatus.CHECKMATE

    def test_draw(self, engine: PythonChessEngine) -> None:
        snapshot = engine.initial_snapshot(STALEMATE_FEN)
        assert resolve_status(engine, snapshot) == GameStatus.DRAW

    @pytest.mark.parametrize(
        ("status", "terminal"),
        [
            (GameStatus.IN_PROGRESS, False),
            (GameStatus.CHECK, False),
            (GameStatus.CHECKMATE, True),
            (GameStatus.DRAW, True),
        ],
    )
    def test_is_terminal(self, status: GameStatus, terminal: bool) -> None:
        assert status.is_terminal is terminal


class TestDescribeStatus:
    def test_white_to_move(self, engine: PythonChessEngine) -> None:
        assert describe_status(engine, engine.initial_snapshot()) == "White to move"

    def test_check_suffix(self, engine: PythonChessEngine) -> None:
        snapshot = engine.initial_snapshot(BLACK_IN_CHECK_FEN)
        assert describe_status(engine, snapshot) == "Black to move (Check!)"

    def test_checkmate_names_winner(self, engine: PythonChessEngine) -> None:
        snapshot = _fools_mate(engine)
        assert describe_status(engine, snapshot) == "Game Over - Checkmate! Black wins."
        assert winner(engine, snapshot) == Side.BLACK

    def test_draw_text(self, engine: PythonChessEngine) -> None:
        snapshot = engine.initial_snapshot(STALEMATE_FEN)
        assert describe_status(engine, snapshot) == "Game Over - Draw"
        assert winner(engine, snapshot) is None
