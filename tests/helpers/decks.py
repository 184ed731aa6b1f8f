"""Builders for in-memory decks used across reconciliation tests.

Coordinates are 1-based, as they appear in a deck. On the default 10x10x3 test
grid a cell ``(i, j, k)`` has global index ``(i-1) + (j-1)*10 + (k-1)*100``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nncstore.domain.model import (
    BlockKind,
    ConnectionDeclaration,
    DeclarationBlock,
    Deck,
    KeywordLocation,
)

if TYPE_CHECKING:
    from nncstore.domain.model import ConnectionRecord

type Cell = tuple[int, int, int]

# Named cells on the 10x10x3 grid with their global indices.
CELL_0: Cell = (1, 1, 1)  # 0
CELL_1: Cell = (2, 1, 1)  # 1, +X neighbor of CELL_0
CELL_10: Cell = (1, 2, 1)  # 10, +Y neighbor of CELL_0
CELL_22: Cell = (3, 3, 1)  # 22
CELL_100: Cell = (1, 1, 2)  # 100
CELL_144: Cell = (5, 5, 2)  # 144
CELL_277: Cell = (8, 8, 3)  # 277


def declaration(first: Cell, second: Cell, value: float) -> ConnectionDeclaration:
    return ConnectionDeclaration(*first, *second, value)


def block(
    kind: BlockKind,
    *records: ConnectionDeclaration,
    filename: str = "CASE.DATA",
    line: int = 1,
) -> DeclarationBlock:
    return DeclarationBlock(
        kind=kind,
        records=records,
        location=KeywordLocation(kind.value, filename, line),
    )


def deck(*blocks: DeclarationBlock) -> Deck:
    return Deck.of(blocks)


def as_tuples(records: list[ConnectionRecord]) -> list[tuple[int, int, float]]:
    return [(record.cell1, record.cell2, record.value) for record in records]
