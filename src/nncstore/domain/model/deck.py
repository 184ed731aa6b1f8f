"""In-memory deck content consumed by the reconciliation stages.

The deck is already parsed: every record carries six 1-based grid
coordinates and one value in SI units. Adapters build these objects; the
domain only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .location import KeywordLocation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .enums import BlockKind

type Coordinates = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ConnectionDeclaration:
    """One record of an ``NNC``, ``EDITNNC`` or ``EDITNNCR`` keyword."""

    i1: int
    j1: int
    k1: int
    i2: int
    j2: int
    k2: int
    value: float

    @property
    def first(self) -> Coordinates:
        return (self.i1, self.j1, self.k1)

    @property
    def second(self) -> Coordinates:
        return (self.i2, self.j2, self.k2)


@dataclass(frozen=True, slots=True)
class DeclarationBlock:
    """One keyword occurrence with its records in declaration order."""

    kind: BlockKind
    records: tuple[ConnectionDeclaration, ...] = ()
    location: KeywordLocation = field(default_factory=KeywordLocation)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(slots=True)
class Deck:
    """Ordered keyword blocks of one input deck."""

    _blocks: list[DeclarationBlock] = field(default_factory=list["DeclarationBlock"])

    @classmethod
    def of(cls, blocks: Iterable[DeclarationBlock]) -> Deck:
        return cls(list(blocks))

    @property
    def all_blocks(self) -> tuple[DeclarationBlock, ...]:
        return tuple(self._blocks)

    def add(self, block: DeclarationBlock) -> None:
        self._blocks.append(block)

    def blocks(self, kind: BlockKind) -> tuple[DeclarationBlock, ...]:
        """Return the blocks of ``kind`` in file order."""

        return tuple(block for block in self._blocks if block.kind is kind)
