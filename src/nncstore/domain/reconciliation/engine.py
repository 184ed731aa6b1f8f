"""Orchestrator for the reconciliation stages.

Stage order is fixed: each stage relies on the sorted, final output of the
previous one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from nncstore.domain.model import ConnectionStore

from .base import load_base_connections
from .edit import reconcile_direct_multipliers
from .editr import reconcile_reversed_overrides

if TYPE_CHECKING:
    from nncstore.domain.model import Deck
    from nncstore.domain.ports import GridAddressResolver

log = logging.getLogger(__name__)


class ReconcileStage(Protocol):
    """Read one keyword kind from ``deck`` and update ``store`` in place."""

    def __call__(
        self,
        store: ConnectionStore,
        grid: GridAddressResolver,
        deck: Deck,
    ) -> None: ...


@dataclass(slots=True)
class ReconciliationEngine:
    """Run base loading, ``EDITNNC`` and ``EDITNNCR`` reconciliation in order."""

    load_base: ReconcileStage = load_base_connections
    apply_edit: ReconcileStage = reconcile_direct_multipliers
    apply_editr: ReconcileStage = reconcile_reversed_overrides

    def reconcile(self, grid: GridAddressResolver, deck: Deck) -> ConnectionStore:
        store = ConnectionStore()
        self.load_base(store, grid, deck)
        self.apply_edit(store, grid, deck)
        self.apply_editr(store, grid, deck)
        log.debug(
            "Reconciled connections: base=%d, edit=%d, reversed_edit=%d",
            len(store.base),
            len(store.edit),
            len(store.reversed_edit),
        )
        return store


def build_connection_store(grid: GridAddressResolver, deck: Deck) -> ConnectionStore:
    """Build the reconciled connection store for ``deck`` on ``grid``."""

    return ReconciliationEngine().reconcile(grid, deck)
