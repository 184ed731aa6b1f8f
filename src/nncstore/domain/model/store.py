"""Final connection sets with their keyword provenance."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .connection import CellIndex, ConnectionRecord, pair_key
from .location import KeywordLocation

if TYPE_CHECKING:
    from collections.abc import Iterable


def _records(values: Iterable[tuple[CellIndex, CellIndex, float]]) -> list[ConnectionRecord]:
    return [ConnectionRecord(cell1, cell2, value) for cell1, cell2, value in values]


@dataclass(slots=True)
class ConnectionStore:
    """Holds the base, edit and reversed-edit connection sets.

    ``base`` is sorted by pair and may hold several entries for one pair.
    ``edit`` and ``reversed_edit`` are sorted with at most one entry per pair,
    and no pair appears in both.

    One keyword location is kept per category. It is recorded by the first
    block that contributes a record and never replaced afterwards.
    """

    base: list[ConnectionRecord] = field(default_factory=list["ConnectionRecord"])
    edit: list[ConnectionRecord] = field(default_factory=list["ConnectionRecord"])
    reversed_edit: list[ConnectionRecord] = field(default_factory=list["ConnectionRecord"])
    _nnc_location: KeywordLocation | None = field(default=None, init=False)
    _edit_location: KeywordLocation | None = field(default=None, init=False)
    _editr_location: KeywordLocation | None = field(default=None, init=False)

    @classmethod
    def serialization_fixture(cls) -> ConnectionStore:
        """Canonical instance used by snapshot round-trip checks."""

        values = ((1, 2, 1.0), (2, 3, 2.0))
        store = cls(base=_records(values), edit=_records(values), reversed_edit=_records(values))
        store.record_input_location(KeywordLocation("NNC?", "File", 123))
        store.record_edit_location(KeywordLocation("EDITNNC?", "File", 123))
        store.record_editr_location(KeywordLocation("EDITNNCR?", "File", 123))
        return store

    def add(self, cell1: CellIndex, cell2: CellIndex, value: float) -> bool:
        """Insert a base connection, keeping ``base`` sorted by pair."""

        if cell1 > cell2:
            cell1, cell2 = cell2, cell1
        record = ConnectionRecord(cell1, cell2, value)
        position = bisect_left(self.base, record.pair, key=pair_key)
        self.base.insert(position, record)
        return True

    def add_edit(self, record: ConnectionRecord) -> None:
        """Append an edit multiplier, composing with the last entry of the same pair."""

        if self.edit and self.edit[-1].pair == record.pair:
            self.edit[-1].value *= record.value
            return
        self.edit.append(record.copy())

    @property
    def has_input_location(self) -> bool:
        return self._nnc_location is not None

    @property
    def has_edit_location(self) -> bool:
        return self._edit_location is not None

    @property
    def has_editr_location(self) -> bool:
        return self._editr_location is not None

    def record_input_location(self, location: KeywordLocation) -> None:
        if self._nnc_location is None:
            self._nnc_location = location

    def record_edit_location(self, location: KeywordLocation) -> None:
        if self._edit_location is None:
            self._edit_location = location

    def record_editr_location(self, location: KeywordLocation) -> None:
        if self._editr_location is None:
            self._editr_location = location

    # Per-record provenance is not tracked yet; the record argument keeps the
    # signature stable for when it is.
    def input_location(self, _record: ConnectionRecord | None = None) -> KeywordLocation:
        return self._nnc_location or KeywordLocation()

    def edit_location(self, _record: ConnectionRecord | None = None) -> KeywordLocation:
        return self._edit_location or KeywordLocation()

    def editr_location(self, _record: ConnectionRecord | None = None) -> KeywordLocation:
        return self._editr_location or KeywordLocation()
