"""Input document locations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import require_env_vars

DECK_ENV_VAR = "NNCSTORE_DECK"
GRID_ENV_VAR = "NNCSTORE_GRID"


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Paths of the deck and grid documents to reconcile."""

    deck_path: Path
    grid_path: Path


def get_input_config(
    *,
    deck_path: Path | None = None,
    grid_path: Path | None = None,
) -> InputConfig:
    """Use explicit paths where given, otherwise fall back to the environment."""

    names = [
        name
        for name, explicit in ((DECK_ENV_VAR, deck_path), (GRID_ENV_VAR, grid_path))
        if explicit is None
    ]
    values = require_env_vars(names)
    return InputConfig(
        deck_path=deck_path if deck_path is not None else Path(values[DECK_ENV_VAR]),
        grid_path=grid_path if grid_path is not None else Path(values[GRID_ENV_VAR]),
    )
