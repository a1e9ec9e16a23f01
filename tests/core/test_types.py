"""Tests for Square, Piece and the core enums."""

import pytest

from chessclick.core.enums import PieceKind, Side, SquareColor
from chessclick.core.errors import ChessClickError, InvalidSquareError
from chessclick.core.piece import Piece
from chessclick.core.types import ALL_SQUARES, Square, parse_square


class TestSquare:
    def test_parse_and_name(self) -> None:
        sq = parse_square("e4")
        assert (sq.file, sq.rank) == (4, 3)
        assert sq.name == "e4"
        assert str(sq) == "e4"

    def test_index_round_trip_corners(self) -> None:
        assert Square.parse("a1").index == 0
        assert Square.parse("h8").index == 63
        assert Square.from_index(28) == Square.parse("e4")

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(InvalidSquareError):
            Square.parse(name)

    def test_out_of_range_coordinates_rejected(self) -> None:
        with pytest.raises(InvalidSquareError):
            Square(8, 0)
        with pytest.raises(InvalidSquareError):
            Square.from_index(64)

    def test_invalid_square_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Square.parse("z0")
        assert issubclass(InvalidSquareError, ChessClickError)

    def test_value_semantics(self) -> None:
        assert Square.parse("d5") == Square(3, 4)
        assert len({Square.parse("d5"), Square(3, 4)}) == 1

    def test_all_squares_unique(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64

    def test_square_colors(self) -> None:
        assert Square.parse("a1").color == SquareColor.DARK
        assert Square.parse("h1").color == SquareColor.LIGHT
        assert Square.parse("a8").color == SquareColor.LIGHT
        assert Square.parse("h8").color == SquareColor.DARK


class TestPiece:
    def test_fen_char(self) -> None:
        assert str(Piece(PieceKind.KNIGHT, Side.WHITE)) == "N"
        assert str(Piece(PieceKind.QUEEN, Side.BLACK)) == "q"

    def test_symbol_and_asset_code(self) -> None:
        piece = Piece(PieceKind.KING, Side.BLACK)
        assert piece.symbol == "♚"
        assert piece.asset_code == "bK"

    def test_side_opposite(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert Side.BLACK.opposite == Side.WHITE
        assert Side.BLACK.display_name == "Black"
