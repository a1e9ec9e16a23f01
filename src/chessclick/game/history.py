"""HistoryTracker: append-only log of accepted moves with one-ply undo."""

from __future__ import annotations

from dataclasses import dataclass

from chessclick.game.interfaces import LastMove, MoveRecord
from chessclick.rules.interfaces import RulesEngine, Snapshot


@dataclass(frozen=True, slots=True)
class Rewind:
    """What an undo produced: the rewound snapshot and the new last move."""

    snapshot: Snapshot
    last_move: LastMove | None
    undone: MoveRecord


class HistoryTracker:
    """Owns the ordered list of :class:`MoveRecord`.

    The log length always equals the number of plies applied since the
    last :meth:`clear`.
    """

    __slots__ = ("_engine", "_records")

    def __init__(self, engine: RulesEngine) -> None:
        self._engine = engine
        self._records: list[MoveRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[MoveRecord, ...]:
        return tuple(self._records)

    @property
    def last_move(self) -> LastMove | None:
        if not self._records:
            return None
        return self._records[-1].endpoints

    @property
    def can_undo(self) -> bool:
        return bool(self._records)

    def append(self, record: MoveRecord) -> None:
        self._records.append(record)

    def undo(self, snapshot: Snapshot) -> Rewind | None:
        """Pop the last record and rewind *snapshot* by one ply.

        Returns ``None`` (and changes nothing) when the log is empty.
        """
        if not self._records:
            return None
        rewound = self._engine.undo_last_ply(snapshot)
        undone = self._records.pop()
        return Rewind(rewound, self.last_move, undone)

    def clear(self) -> None:
        self._records.clear()

    def move_rows(self) -> list[tuple[int, str, str | None]]:
        """Pair plies into numbered rows: ``(1, "e4", "e5"), (2, "Nf3", None)``."""
        notations = [record.notation for record in self._records]
        rows: list[tuple[int, str, str | None]] = []
        for i in range(0, len(notations), 2):
            black = notations[i + 1] if i + 1 < len(notations) else None
            rows.append((i // 2 + 1, notations[i], black))
        return rows
