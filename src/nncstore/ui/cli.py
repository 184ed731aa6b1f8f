from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from nncstore.app import inspect_snapshot, reconcile_connections
from nncstore.config import (
    ConfigurationError,
    configure_logging,
    get_input_config,
    resolve_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile non-neighbor connections")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level name (defaults to NNCSTORE_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Build the connection store from a deck and a grid",
    )
    reconcile.add_argument(
        "--deck",
        type=Path,
        help="JSON deck with NNC/EDITNNC/EDITNNCR keywords (defaults to NNCSTORE_DECK)",
    )
    reconcile.add_argument(
        "--grid",
        type=Path,
        help="JSON grid with dims and optional actnum (defaults to NNCSTORE_GRID)",
    )
    reconcile.add_argument(
        "--output",
        type=Path,
        help="Write the reconciled store as a JSON snapshot to this path",
    )

    inspect = subparsers.add_parser("inspect", help="Summarise a connection store snapshot")
    inspect.add_argument("snapshot", type=Path, help="Snapshot written by 'reconcile --output'")

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=resolve_log_level(parsed_args.log_level))
        config = None
        if parsed_args.command == "reconcile":
            config = get_input_config(deck_path=parsed_args.deck, grid_path=parsed_args.grid)
    except (ValueError, ConfigurationError):
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "reconcile":
            reconcile_connections(config=config, output_path=parsed_args.output)
        elif parsed_args.command == "inspect":
            inspect_snapshot(parsed_args.snapshot)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
