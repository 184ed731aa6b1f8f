"""Port for resolving structured grid addresses."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GridAddressResolver(Protocol):
    """Read-only view of a structured grid.

    Coordinates are 0-based. ``global_index`` is only meaningful for active
    cells.
    """

    @property
    def nx(self) -> int: ...

    @property
    def ny(self) -> int: ...

    @property
    def nz(self) -> int: ...

    def cell_active(self, i: int, j: int, k: int) -> bool: ...

    def global_index(self, i: int, j: int, k: int) -> int: ...
