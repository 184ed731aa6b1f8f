"""Shared logging helpers for nncstore."""

from __future__ import annotations

import logging

from .env import optional_env_var

LOG_LEVEL_ENV_VAR = "NNCSTORE_LOG_LEVEL"


def resolve_log_level(name: str | None = None) -> int:
    """Map a level name (or ``NNCSTORE_LOG_LEVEL``) to a logging level, default INFO."""

    level_name = (name or optional_env_var(LOG_LEVEL_ENV_VAR) or "INFO").upper()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        raise ValueError(f"Unknown log level: {level_name}")
    return level


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI format.

    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
