from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nncstore.adapters.snapshot import (
    SnapshotFormatError,
    dump_store,
    load_store,
    to_snapshot,
    write_store,
)
from nncstore.domain.model import ConnectionStore, KeywordLocation

if TYPE_CHECKING:
    from pathlib import Path


def test_fixture_survives_round_trip() -> None:
    store = ConnectionStore.serialization_fixture()

    restored = load_store(dump_store(store))

    assert restored == store
    assert restored.editr_location() == KeywordLocation("EDITNNCR?", "File", 123)


def test_absent_locations_stay_absent() -> None:
    store = ConnectionStore()
    store.add(3, 1, 0.25)

    snapshot = to_snapshot(store)
    restored = load_store(dump_store(store))

    assert snapshot.nnc_location is None
    assert not restored.has_input_location
    assert restored == store


def test_load_store_rejects_malformed_snapshots() -> None:
    with pytest.raises(SnapshotFormatError):
        load_store('{"base": [[1, 2]]}')

    with pytest.raises(SnapshotFormatError):
        load_store('{"unknown": []}')


def test_write_store_writes_json(tmp_path: Path) -> None:
    path = tmp_path / "store.json"

    write_store(ConnectionStore.serialization_fixture(), path)

    assert load_store(path.read_text(encoding="utf-8")) == ConnectionStore.serialization_fixture()
