"""Rules engine layer: the capability interface and its python-chess binding."""

from chessclick.rules.interfaces import AppliedMove, RulesEngine, Snapshot
from chessclick.rules.python_chess import PythonChessEngine

__all__ = [
    "AppliedMove",
    "PythonChessEngine",
    "RulesEngine",
    "Snapshot",
]
