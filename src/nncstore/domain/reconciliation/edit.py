"""Apply ``EDITNNC`` multipliers to the base connections.

Responsibilities of this stage:
- drop neutral multipliers, unresolvable addresses and true-neighbor pairs
- scale every base connection of a matching pair
- collect multipliers without a base connection into ``store.edit``

Multipliers for the same pair compose by multiplication in declaration order,
both when they hit base connections and when they end up in ``store.edit``.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nncstore.domain.model import BlockKind, ConnectionRecord, pair_key

from .keys import is_neighbor, make_index_pair

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nncstore.domain.model import ConnectionStore, Deck, KeywordLocation
    from nncstore.domain.ports import GridAddressResolver

NEUTRAL_MULTIPLIER = 1.0

log = logging.getLogger(__name__)


@dataclass(slots=True)
class CollectedOverrides:
    """Override records that survived address resolution, with their provenance."""

    records: list[ConnectionRecord] = field(default_factory=list["ConnectionRecord"])
    location: KeywordLocation | None = None
    dropped: int = 0


def collect_direct_multipliers(grid: GridAddressResolver, deck: Deck) -> CollectedOverrides:
    """Resolve ``EDITNNC`` records and return them sorted by pair."""

    collected = CollectedOverrides()
    for block in deck.blocks(BlockKind.EDITNNC):
        loaded = 0
        for declaration in block.records:
            if declaration.value == NEUTRAL_MULTIPLIER:
                collected.dropped += 1
                continue

            index_pair = make_index_pair(grid, declaration)
            if index_pair is None or is_neighbor(grid, *index_pair):
                collected.dropped += 1
                continue

            g1, g2 = index_pair
            collected.records.append(ConnectionRecord(g1, g2, declaration.value))
            loaded += 1

        if loaded and collected.location is None:
            collected.location = block.location

    collected.records.sort(key=pair_key)
    return collected


def apply_direct_multipliers(
    store: ConnectionStore,
    candidates: Sequence[ConnectionRecord],
) -> None:
    """Merge sorted multiplier ``candidates`` into ``store``.

    ``store.base`` must be sorted by pair. The cursor walks ``base`` in step
    with the candidates and is re-synced by binary search whenever it does not
    point at the candidate's pair; repeated candidates for one pair therefore
    find the same base entries again.
    """

    base = store.base
    cursor = 0
    for candidate in candidates:
        if cursor == len(base) or base[cursor].pair != candidate.pair:
            cursor = bisect_left(base, candidate.pair, key=pair_key)

        matched = False
        while cursor < len(base) and base[cursor].pair == candidate.pair:
            base[cursor].value *= candidate.value
            cursor += 1
            matched = True

        if not matched:
            store.add_edit(candidate)


def reconcile_direct_multipliers(
    store: ConnectionStore,
    grid: GridAddressResolver,
    deck: Deck,
) -> None:
    collected = collect_direct_multipliers(grid, deck)
    if collected.location is not None:
        store.record_edit_location(collected.location)

    edits_before = len(store.edit)
    apply_direct_multipliers(store, collected.records)
    log.debug(
        "Applied %d EDITNNC multipliers (%d new edit entries), dropped %d records",
        len(collected.records),
        len(store.edit) - edits_before,
        collected.dropped,
    )
