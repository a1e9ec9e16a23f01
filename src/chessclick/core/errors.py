"""Exception hierarchy.

Expected outcomes of play (an illegal move, an empty-history undo, a
click on a finished game) are return values, not exceptions.  What is
raised here is misuse: malformed squares or positions handed in by a
caller.
"""

from __future__ import annotations


class ChessClickError(Exception):
    """Base class for every error raised by this package."""


class InvalidSquareError(ChessClickError, ValueError):
    """A square name or index outside the 8x8 board."""


class InvalidPositionError(ChessClickError, ValueError):
    """A starting position the rules engine could not load."""
