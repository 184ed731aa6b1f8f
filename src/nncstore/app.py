"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nncstore.adapters.deck import load_deck
from nncstore.adapters.grid import load_grid
from nncstore.adapters.snapshot import load_store, write_store
from nncstore.config import get_input_config
from nncstore.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from pathlib import Path

    from nncstore.config import InputConfig
    from nncstore.domain.model import ConnectionStore


log = getLogger(__name__)


def log_store_summary(store: ConnectionStore) -> None:
    log.info(
        "Connections: base=%d (%s), edit=%d (%s), reversed_edit=%d (%s)",
        len(store.base),
        store.input_location(),
        len(store.edit),
        store.edit_location(),
        len(store.reversed_edit),
        store.editr_location(),
    )


def reconcile_connections(
    *,
    config: InputConfig | None = None,
    output_path: Path | None = None,
    engine: ReconciliationEngine | None = None,
) -> ConnectionStore:
    """Load deck and grid, reconcile their connections and optionally write a snapshot."""

    effective_config = config or get_input_config()
    effective_engine = engine or ReconciliationEngine()
    log.info(
        "Starting reconciliation: deck=%s, grid=%s",
        effective_config.deck_path,
        effective_config.grid_path,
    )

    grid = load_grid(effective_config.grid_path)
    deck = load_deck(effective_config.deck_path)
    store = effective_engine.reconcile(grid, deck)
    log_store_summary(store)

    if output_path is not None:
        write_store(store, output_path)
    return store


def inspect_snapshot(path: Path) -> ConnectionStore:
    """Read a snapshot written by :func:`reconcile_connections` and log its summary."""

    store = load_store(path.read_text(encoding="utf-8"))
    log_store_summary(store)
    return store
