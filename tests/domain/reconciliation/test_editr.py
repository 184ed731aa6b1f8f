from __future__ import annotations

from typing import TYPE_CHECKING

from nncstore.domain.model import BlockKind, ConnectionRecord, ConnectionStore, KeywordLocation
from nncstore.domain.reconciliation import (
    apply_reversed_overrides,
    collect_reversed_overrides,
    load_base_connections,
    reconcile_direct_multipliers,
    reconcile_reversed_overrides,
)
from nncstore.domain.reconciliation.editr import keep_latest, without_pairs
from tests.helpers.decks import (
    CELL_0,
    CELL_1,
    CELL_22,
    CELL_100,
    CELL_144,
    CELL_277,
    as_tuples,
    block,
    deck,
    declaration,
)

if TYPE_CHECKING:
    from nncstore.domain.ports import GridAddressResolver


def _records(*rows: tuple[int, int, float]) -> list[ConnectionRecord]:
    return [ConnectionRecord(*row) for row in rows]


def test_keep_latest_keeps_first_of_each_pair() -> None:
    newest_first = _records((3, 4, 7.0), (1, 8, 2.0), (3, 4, 5.0), (1, 8, 1.0))

    assert as_tuples(keep_latest(newest_first)) == [(1, 8, 2.0), (3, 4, 7.0)]


def test_without_pairs_is_a_sorted_set_difference() -> None:
    records = _records((1, 2, 1.0), (1, 5, 2.0), (2, 3, 3.0), (4, 9, 4.0))
    excluded = _records((1, 5, 0.0), (3, 3, 0.0), (4, 9, 0.0), (7, 8, 0.0))

    assert as_tuples(without_pairs(records, excluded)) == [(1, 2, 1.0), (2, 3, 3.0)]


def test_last_declaration_wins_across_blocks(grid: GridAddressResolver) -> None:
    store = ConnectionStore()
    source = deck(
        block(BlockKind.EDITNNCR, declaration(CELL_22, CELL_144, 5.0), line=10),
        block(BlockKind.EDITNNCR, declaration(CELL_144, CELL_22, 7.0), line=20),
    )

    reconcile_reversed_overrides(store, grid, source)

    assert as_tuples(store.reversed_edit) == [(22, 144, 7.0)]
    assert store.editr_location() == KeywordLocation("EDITNNCR", "CASE.DATA", 10)


def test_last_declaration_wins_within_block(grid: GridAddressResolver) -> None:
    store = ConnectionStore()
    source = deck(
        block(
            BlockKind.EDITNNCR,
            declaration(CELL_144, CELL_277, 4.0),
            declaration(CELL_22, CELL_144, 5.0),
            declaration(CELL_144, CELL_277, 6.0),
            declaration(CELL_22, CELL_144, 7.0),
            declaration(CELL_0, CELL_100, 1.0),
        )
    )

    reconcile_reversed_overrides(store, grid, source)

    assert as_tuples(store.reversed_edit) == [(0, 100, 1.0), (22, 144, 7.0), (144, 277, 6.0)]


def test_collect_prepends_records(grid: GridAddressResolver) -> None:
    source = deck(
        block(
            BlockKind.EDITNNCR,
            declaration(CELL_0, CELL_22, 1.0),
            declaration(CELL_0, CELL_1, 2.0),  # +X neighbor
            declaration(CELL_0, CELL_144, 3.0),
        ),
        block(BlockKind.EDITNNCR, declaration(CELL_0, CELL_277, 4.0)),
    )

    collected = collect_reversed_overrides(grid, source)

    assert as_tuples(collected.records) == [(0, 277, 4.0), (0, 144, 3.0), (0, 22, 1.0)]
    assert collected.dropped == 1


def test_reversed_overrides_keep_neutral_values(grid: GridAddressResolver) -> None:
    store = ConnectionStore()
    source = deck(block(BlockKind.EDITNNCR, declaration(CELL_0, CELL_22, 1.0)))

    reconcile_reversed_overrides(store, grid, source)

    assert as_tuples(store.reversed_edit) == [(0, 22, 1.0)]


def test_reversed_overrides_prune_edit_and_leave_base(grid: GridAddressResolver) -> None:
    store = ConnectionStore()
    source = deck(
        block(BlockKind.NNC, declaration(CELL_0, CELL_22, 10.0)),
        block(
            BlockKind.EDITNNC,
            declaration(CELL_0, CELL_22, 2.0),
            declaration(CELL_0, CELL_144, 3.0),
            declaration(CELL_100, CELL_277, 4.0),
        ),
        block(
            BlockKind.EDITNNCR,
            declaration(CELL_0, CELL_22, 0.5),
            declaration(CELL_0, CELL_144, 0.25),
        ),
    )

    load_base_connections(store, grid, source)
    reconcile_direct_multipliers(store, grid, source)
    reconcile_reversed_overrides(store, grid, source)

    assert as_tuples(store.base) == [(0, 22, 20.0)]
    assert as_tuples(store.edit) == [(100, 277, 4.0)]
    assert as_tuples(store.reversed_edit) == [(0, 22, 0.5), (0, 144, 0.25)]


def test_no_valid_records_is_a_noop(masked_grid: GridAddressResolver) -> None:
    store = ConnectionStore(edit=_records((0, 144, 3.0)))
    source = deck(
        block(BlockKind.EDITNNCR),
        block(
            BlockKind.EDITNNCR,
            declaration(CELL_0, CELL_22, 2.0),  # inactive
            declaration(CELL_0, CELL_1, 2.0),  # +X neighbor
        ),
    )

    reconcile_reversed_overrides(store, masked_grid, source)

    assert as_tuples(store.edit) == [(0, 144, 3.0)]
    assert store.reversed_edit == []
    assert not store.has_editr_location


def test_apply_with_empty_collection_keeps_previous_state() -> None:
    store = ConnectionStore(edit=_records((1, 5, 2.0)), reversed_edit=_records((2, 9, 1.0)))

    apply_reversed_overrides(store, [])

    assert as_tuples(store.edit) == [(1, 5, 2.0)]
    assert as_tuples(store.reversed_edit) == [(2, 9, 1.0)]
