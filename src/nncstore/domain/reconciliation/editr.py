"""Reconcile ``EDITNNCR`` overrides, where the last declaration of a pair wins.

Records are gathered most-recent-first by prepending to a deque. A stable sort
by pair then puts the latest declaration at the head of every run of equal
pairs, and only that head is kept.

Surviving pairs are removed from ``store.edit`` because the replacement value
makes any multiplier for the same pair meaningless. ``store.base`` is left as
loaded: the raw transmissibilities are still needed for grid construction, and
the consumer applies the replacement values itself.
"""

from __future__ import annotations

import logging
from collections import deque
from itertools import groupby
from typing import TYPE_CHECKING

from nncstore.domain.model import BlockKind, ConnectionRecord, pair_key

from .edit import CollectedOverrides
from .keys import is_neighbor, make_index_pair

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from nncstore.domain.model import ConnectionStore, Deck
    from nncstore.domain.ports import GridAddressResolver

log = logging.getLogger(__name__)


def collect_reversed_overrides(grid: GridAddressResolver, deck: Deck) -> CollectedOverrides:
    """Resolve ``EDITNNCR`` records, most recently declared first."""

    newest_first: deque[ConnectionRecord] = deque()
    collected = CollectedOverrides()
    for block in deck.blocks(BlockKind.EDITNNCR):
        loaded = 0
        for declaration in block.records:
            index_pair = make_index_pair(grid, declaration)
            if index_pair is None or is_neighbor(grid, *index_pair):
                collected.dropped += 1
                continue

            g1, g2 = index_pair
            newest_first.appendleft(ConnectionRecord(g1, g2, declaration.value))
            loaded += 1

        if loaded and collected.location is None:
            collected.location = block.location

    collected.records = list(newest_first)
    return collected


def keep_latest(newest_first: Iterable[ConnectionRecord]) -> list[ConnectionRecord]:
    """Sort by pair and keep the first record of every pair."""

    ordered = sorted(newest_first, key=pair_key)
    return [next(group) for _pair, group in groupby(ordered, key=pair_key)]


def without_pairs(
    records: Sequence[ConnectionRecord],
    excluded: Sequence[ConnectionRecord],
) -> list[ConnectionRecord]:
    """Return ``records`` minus every pair in ``excluded``; both sorted by pair."""

    kept: list[ConnectionRecord] = []
    position = 0
    for record in records:
        while position < len(excluded) and excluded[position].pair < record.pair:
            position += 1
        if position < len(excluded) and excluded[position].pair == record.pair:
            continue
        kept.append(record)
    return kept


def apply_reversed_overrides(
    store: ConnectionStore,
    newest_first: Sequence[ConnectionRecord],
) -> None:
    if not newest_first:
        return

    latest = keep_latest(newest_first)
    store.edit = without_pairs(store.edit, latest)
    store.reversed_edit = latest


def reconcile_reversed_overrides(
    store: ConnectionStore,
    grid: GridAddressResolver,
    deck: Deck,
) -> None:
    collected = collect_reversed_overrides(grid, deck)
    if collected.location is not None:
        store.record_editr_location(collected.location)

    edits_before = len(store.edit)
    apply_reversed_overrides(store, collected.records)
    log.debug(
        "Kept %d EDITNNCR overrides from %d records, pruned %d edit entries, dropped %d records",
        len(store.reversed_edit),
        len(collected.records),
        edits_before - len(store.edit),
        collected.dropped,
    )
