"""Reconciliation of ``NNC``, ``EDITNNC`` and ``EDITNNCR`` declarations.

Layered flow:
1) resolve coordinate pairs into canonical global-index keys
2) load base connections and sort them by pair
3) merge ``EDITNNC`` multipliers into base connections or the edit set
4) deduplicate ``EDITNNCR`` overrides (last wins) and prune the edit set
"""

from __future__ import annotations

from .base import load_base_connections
from .edit import (
    NEUTRAL_MULTIPLIER,
    CollectedOverrides,
    apply_direct_multipliers,
    collect_direct_multipliers,
    reconcile_direct_multipliers,
)
from .editr import (
    apply_reversed_overrides,
    collect_reversed_overrides,
    reconcile_reversed_overrides,
)
from .engine import ReconciliationEngine, ReconcileStage, build_connection_store
from .keys import global_index, is_neighbor, make_index_pair

__all__ = [
    "NEUTRAL_MULTIPLIER",
    "CollectedOverrides",
    "ReconcileStage",
    "ReconciliationEngine",
    "apply_direct_multipliers",
    "apply_reversed_overrides",
    "build_connection_store",
    "collect_direct_multipliers",
    "collect_reversed_overrides",
    "global_index",
    "is_neighbor",
    "load_base_connections",
    "make_index_pair",
    "reconcile_direct_multipliers",
    "reconcile_reversed_overrides",
]
