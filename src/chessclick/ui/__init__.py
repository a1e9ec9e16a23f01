"""Qt integration for renderers built on the game layer."""

from chessclick.ui.session_bridge import SessionBridge

__all__ = ["SessionBridge"]
