"""Board projection from snapshot to renderable cell descriptors.

Cells are ordered the way a white-side view reads them: rank 8 first,
file a to h within each rank.  Nothing is cached; callers recompute
after every snapshot change.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chessclick.core.enums import SquareColor
from chessclick.core.piece import Piece
from chessclick.core.types import Square
from chessclick.game.interfaces import LastMove, SelectionState
from chessclick.rules.interfaces import RulesEngine, Snapshot


@dataclass(frozen=True, slots=True)
class Cell:
    """One square as a renderer sees it."""

    square: Square
    piece: Piece | None
    color: SquareColor
    rank_label: str | None = None  # set on the a-file
    file_label: str | None = None  # set on the first rank


@dataclass(frozen=True, slots=True)
class CellMarks:
    """Interaction overlays for a single square."""

    selected: bool = False
    hint: bool = False
    last_move: bool = False

    @property
    def any(self) -> bool:
        return self.selected or self.hint or self.last_move


def project_board(engine: RulesEngine, snapshot: Snapshot) -> tuple[Cell, ...]:
    """Return the 64 cells of *snapshot*, top-left (a8) first."""
    cells: list[Cell] = []
    for row in range(8):
        for col in range(8):
            square = Square(col, 7 - row)
            cells.append(
                Cell(
                    square=square,
                    piece=engine.piece_at(snapshot, square),
                    color=square.color,
                    rank_label=square.rank_name if col == 0 else None,
                    file_label=square.file_name if row == 7 else None,
                )
            )
    return tuple(cells)


def mark_cells(
    cells: Iterable[Cell],
    selection: SelectionState,
    last_move: LastMove | None,
) -> dict[Square, CellMarks]:
    """Overlay flags for every cell that carries at least one mark."""
    marks: dict[Square, CellMarks] = {}
    for cell in cells:
        sq = cell.square
        mark = CellMarks(
            selected=sq == selection.selected,
            hint=sq in selection.hints,
            last_move=last_move is not None and last_move.touches(sq),
        )
        if mark.any:
            marks[sq] = mark
    return marks
