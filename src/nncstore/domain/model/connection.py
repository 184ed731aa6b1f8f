"""Connection records and their canonical pair key."""

from __future__ import annotations

from dataclasses import dataclass

type CellIndex = int
type PairKey = tuple[CellIndex, CellIndex]


@dataclass(slots=True)
class ConnectionRecord:
    """One connection between two global cells.

    ``value`` is a transmissibility in the base set and a multiplier or a
    replacement value in the edit sets; the owning collection decides.

    Equality compares all three fields. Ordering is by :attr:`pair` only and is
    applied through ``key=pair_key`` wherever a collection is sorted or searched.
    """

    cell1: CellIndex
    cell2: CellIndex
    value: float

    @property
    def pair(self) -> PairKey:
        return (self.cell1, self.cell2)

    def copy(self) -> ConnectionRecord:
        return ConnectionRecord(self.cell1, self.cell2, self.value)


def pair_key(record: ConnectionRecord) -> PairKey:
    return (record.cell1, record.cell2)
