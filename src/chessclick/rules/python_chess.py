"""Rules engine backed by the ``python-chess`` library."""

from __future__ import annotations

import chess

from chessclick.core.enums import PieceKind, Side
from chessclick.core.errors import InvalidPositionError
from chessclick.core.piece import Piece
from chessclick.core.types import Square
from chessclick.rules.interfaces import AppliedMove, RulesEngine, Snapshot

_KINDS: dict[chess.PieceType, PieceKind] = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}
_PIECE_TYPES: dict[PieceKind, chess.PieceType] = {v: k for k, v in _KINDS.items()}


def _board(snapshot: Snapshot) -> chess.Board:
    if not isinstance(snapshot, chess.Board):
        raise TypeError(f"Not a python-chess snapshot: {type(snapshot).__name__}")
    return snapshot


class PythonChessEngine(RulesEngine):
    """:class:`RulesEngine` over :class:`chess.Board`.

    Snapshots are private ``chess.Board`` copies carrying their move
    stack, so :meth:`undo_last_ply` can pop.  Draws follow the usual
    GUI convention: stalemate, insufficient material, the fifty-move
    rule and threefold repetition all end the game without a claim.
    """

    __slots__ = ()

    def initial_snapshot(self, fen: str | None = None) -> Snapshot:
        if fen is None:
            return chess.Board()
        try:
            board = chess.Board(fen)
        except ValueError as exc:
            raise InvalidPositionError(f"Invalid FEN {fen!r}: {exc}") from exc
        status = board.status()
        if status != chess.STATUS_VALID:
            raise InvalidPositionError(f"Illegal position {fen!r}: {status!r}")
        return board

    def side_to_move(self, snapshot: Snapshot) -> Side:
        return Side.WHITE if _board(snapshot).turn == chess.WHITE else Side.BLACK

    def piece_at(self, snapshot: Snapshot, square: Square) -> Piece | None:
        piece = _board(snapshot).piece_at(square.index)
        if piece is None:
            return None
        side = Side.WHITE if piece.color == chess.WHITE else Side.BLACK
        return Piece(_KINDS[piece.piece_type], side)

    def legal_destinations(
        self, snapshot: Snapshot, square: Square
    ) -> frozenset[Square]:
        board = _board(snapshot)
        return frozenset(
            Square.from_index(move.to_square)
            for move in board.legal_moves
            if move.from_square == square.index
        )

    def apply_move(
        self,
        snapshot: Snapshot,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceKind | None = None,
    ) -> AppliedMove | None:
        board = _board(snapshot)
        move = chess.Move(
            from_sq.index,
            to_sq.index,
            promotion=_PIECE_TYPES[promotion] if promotion is not None else None,
        )
        if not board.is_legal(move):
            return None
        notation = board.san(move)
        after = board.copy()
        after.push(move)
        return AppliedMove(after, notation)

    def undo_last_ply(self, snapshot: Snapshot) -> Snapshot:
        board = _board(snapshot).copy()
        board.pop()
        return board

    def is_in_check(self, snapshot: Snapshot) -> bool:
        return _board(snapshot).is_check()

    def is_checkmate(self, snapshot: Snapshot) -> bool:
        return _board(snapshot).is_checkmate()

    def is_draw(self, snapshot: Snapshot) -> bool:
        board = _board(snapshot)
        return (
            board.is_stalemate()
            or board.is_insufficient_material()
            or board.halfmove_clock >= 100
            or board.is_repetition(3)
        )

    def is_game_over(self, snapshot: Snapshot) -> bool:
        return self.is_checkmate(snapshot) or self.is_draw(snapshot)

    def serialize(self, snapshot: Snapshot) -> str:
        return _board(snapshot).fen()
