"""Regular Cartesian grid with an optional activity mask."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class GridFormatError(ValueError):
    """Raised when grid dimensions or the activity mask are inconsistent."""


@dataclass(frozen=True, slots=True)
class CartesianGrid:
    """``nx * ny * nz`` cells in natural order, ``i`` running fastest.

    ``actnum`` holds one flag per cell; ``None`` means every cell is active.
    """

    nx: int
    ny: int
    nz: int
    actnum: tuple[bool, ...] | None = None

    def __post_init__(self) -> None:
        if min(self.nx, self.ny, self.nz) <= 0:
            raise GridFormatError(
                f"Grid dimensions must be positive, got {self.nx}x{self.ny}x{self.nz}"
            )
        if self.actnum is not None and len(self.actnum) != self.cell_count:
            raise GridFormatError(
                f"ACTNUM has {len(self.actnum)} entries, grid has {self.cell_count} cells"
            )

    @classmethod
    def with_inactive(
        cls,
        nx: int,
        ny: int,
        nz: int,
        inactive: Sequence[tuple[int, int, int]],
    ) -> CartesianGrid:
        """Build a grid where the given 0-based cells are inactive."""

        flags = [True] * (nx * ny * nz)
        for i, j, k in inactive:
            flags[i + j * nx + k * nx * ny] = False
        return cls(nx, ny, nz, tuple(flags))

    @property
    def cell_count(self) -> int:
        return self.nx * self.ny * self.nz

    def global_index(self, i: int, j: int, k: int) -> int:
        return i + j * self.nx + k * self.nx * self.ny

    def cell_active(self, i: int, j: int, k: int) -> bool:
        if self.actnum is None:
            return True
        return self.actnum[self.global_index(i, j, k)]
