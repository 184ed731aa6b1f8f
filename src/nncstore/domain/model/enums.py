from __future__ import annotations

from enum import StrEnum


class BlockKind(StrEnum):
    """Deck keywords that declare or edit non-neighbor connections."""

    NNC = "NNC"
    EDITNNC = "EDITNNC"
    EDITNNCR = "EDITNNCR"
