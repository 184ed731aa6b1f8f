"""JSON snapshots of a reconciled connection store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nncstore.domain.model import ConnectionRecord, ConnectionStore, KeywordLocation

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)

type RecordRow = tuple[int, int, float]


class SnapshotFormatError(ValueError):
    """Raised when a snapshot document cannot be decoded."""


class LocationPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str
    filename: str
    lineno: int


class StoreSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base: list[RecordRow] = Field(default_factory=list["RecordRow"])
    edit: list[RecordRow] = Field(default_factory=list["RecordRow"])
    reversed_edit: list[RecordRow] = Field(default_factory=list["RecordRow"])
    nnc_location: LocationPayload | None = None
    edit_location: LocationPayload | None = None
    editr_location: LocationPayload | None = None


def _rows(records: list[ConnectionRecord]) -> list[RecordRow]:
    return [(record.cell1, record.cell2, record.value) for record in records]


def _records(rows: list[RecordRow]) -> list[ConnectionRecord]:
    return [ConnectionRecord(cell1, cell2, value) for cell1, cell2, value in rows]


def _location_payload(location: KeywordLocation | None) -> LocationPayload | None:
    if location is None:
        return None
    return LocationPayload(
        keyword=location.keyword,
        filename=location.filename,
        lineno=location.lineno,
    )


def _location(payload: LocationPayload) -> KeywordLocation:
    return KeywordLocation(payload.keyword, payload.filename, payload.lineno)


def to_snapshot(store: ConnectionStore) -> StoreSnapshot:
    return StoreSnapshot(
        base=_rows(store.base),
        edit=_rows(store.edit),
        reversed_edit=_rows(store.reversed_edit),
        nnc_location=_location_payload(
            store.input_location() if store.has_input_location else None
        ),
        edit_location=_location_payload(
            store.edit_location() if store.has_edit_location else None
        ),
        editr_location=_location_payload(
            store.editr_location() if store.has_editr_location else None
        ),
    )


def from_snapshot(snapshot: StoreSnapshot) -> ConnectionStore:
    store = ConnectionStore(
        base=_records(snapshot.base),
        edit=_records(snapshot.edit),
        reversed_edit=_records(snapshot.reversed_edit),
    )
    if snapshot.nnc_location is not None:
        store.record_input_location(_location(snapshot.nnc_location))
    if snapshot.edit_location is not None:
        store.record_edit_location(_location(snapshot.edit_location))
    if snapshot.editr_location is not None:
        store.record_editr_location(_location(snapshot.editr_location))
    return store


def dump_store(store: ConnectionStore, *, indent: int | None = None) -> str:
    return to_snapshot(store).model_dump_json(indent=indent)


def load_store(text: str) -> ConnectionStore:
    try:
        snapshot = StoreSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise SnapshotFormatError(f"Invalid connection store snapshot: {exc}") from exc
    return from_snapshot(snapshot)


def write_store(store: ConnectionStore, path: Path) -> None:
    path.write_text(dump_store(store, indent=2), encoding="utf-8")
    log.info("Wrote connection store snapshot to %s", path)
