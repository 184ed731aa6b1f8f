"""Public interface for the Cartesian grid adapter."""

from __future__ import annotations

from .cartesian import CartesianGrid, GridFormatError
from .schema import GridPayload, load_grid, parse_grid_json

__all__ = [
    "CartesianGrid",
    "GridFormatError",
    "GridPayload",
    "load_grid",
    "parse_grid_json",
]
