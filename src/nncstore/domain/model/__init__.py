"""Public domain model surface."""

from __future__ import annotations

from nncstore.domain.model.connection import CellIndex, ConnectionRecord, PairKey, pair_key
from nncstore.domain.model.deck import ConnectionDeclaration, DeclarationBlock, Deck
from nncstore.domain.model.enums import BlockKind
from nncstore.domain.model.location import KeywordLocation
from nncstore.domain.model.store import ConnectionStore

__all__ = [  # noqa: RUF022
    # connections
    "CellIndex",
    "PairKey",
    "ConnectionRecord",
    "pair_key",
    # deck
    "BlockKind",
    "ConnectionDeclaration",
    "DeclarationBlock",
    "Deck",
    # provenance
    "KeywordLocation",
    # store
    "ConnectionStore",
]
