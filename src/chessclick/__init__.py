"""chessclick: click-to-move chess interaction core."""

__version__ = "0.1.0"
