"""Canonical pair keys from deck coordinates.

Responsibilities of this stage:
- turn 1-based ``(i, j, k)`` triples into global cell indices
- order the two indices so that the smaller one comes first
- reject out-of-range, inactive and degenerate addresses without raising

Invalid geometry is not an error here: callers skip the record and move on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nncstore.domain.model import CellIndex, ConnectionDeclaration, PairKey
    from nncstore.domain.ports import GridAddressResolver


def global_index(grid: GridAddressResolver, i: int, j: int, k: int) -> CellIndex | None:
    """Return the global index of the 1-based cell ``(i, j, k)``, or ``None``."""

    i, j, k = i - 1, j - 1, k - 1
    if not 0 <= i < grid.nx:
        return None
    if not 0 <= j < grid.ny:
        return None
    if not 0 <= k < grid.nz:
        return None
    if not grid.cell_active(i, j, k):
        return None
    return grid.global_index(i, j, k)


def make_index_pair(
    grid: GridAddressResolver,
    declaration: ConnectionDeclaration,
) -> PairKey | None:
    g1 = global_index(grid, *declaration.first)
    if g1 is None:
        return None
    g2 = global_index(grid, *declaration.second)
    if g2 is None:
        return None
    if g1 == g2:
        return None
    return (g1, g2) if g1 < g2 else (g2, g1)


def is_neighbor(grid: GridAddressResolver, g1: CellIndex, g2: CellIndex) -> bool:
    """Approximate test for pairs the regular grid already connects.

    ``g1`` must not be larger than ``g2``.
    """

    return g2 - g1 in (0, 1, grid.nx, grid.ny)
