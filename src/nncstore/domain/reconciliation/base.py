"""Load base connections from ``NNC`` blocks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nncstore.domain.model import BlockKind, ConnectionRecord, pair_key

from .keys import make_index_pair

if TYPE_CHECKING:
    from nncstore.domain.model import ConnectionStore, Deck
    from nncstore.domain.ports import GridAddressResolver

log = logging.getLogger(__name__)


def load_base_connections(store: ConnectionStore, grid: GridAddressResolver, deck: Deck) -> None:
    """Append every resolvable ``NNC`` record to ``store.base`` and sort by pair.

    Records for the same pair are kept side by side in declaration order; their
    transmissibilities are additive and are not merged here.
    """

    dropped = 0
    for block in deck.blocks(BlockKind.NNC):
        loaded = 0
        for declaration in block.records:
            index_pair = make_index_pair(grid, declaration)
            if index_pair is None:
                dropped += 1
                continue
            g1, g2 = index_pair
            store.base.append(ConnectionRecord(g1, g2, declaration.value))
            loaded += 1

        if loaded:
            store.record_input_location(block.location)

    store.base.sort(key=pair_key)
    log.debug("Loaded %d base connections, dropped %d records", len(store.base), dropped)
