"""Translate JSON deck payloads into domain deck blocks."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from nncstore.domain.model import (
    BlockKind,
    ConnectionDeclaration,
    DeclarationBlock,
    Deck,
    KeywordLocation,
)

from .schema import DeckPayload, DeckPayloadInput, KeywordPayload

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

_SUPPORTED_KEYWORDS = frozenset(kind.value for kind in BlockKind)


class DeckFormatError(ValueError):
    """Raised when a deck document is structurally malformed."""


def _ensure_deck_payload(payload: DeckPayloadInput) -> DeckPayload:
    if isinstance(payload, DeckPayload):
        return payload
    try:
        return DeckPayload.model_validate(payload)
    except ValidationError as exc:
        raise DeckFormatError(f"Invalid deck document: {exc}") from exc


def _translate_keyword(keyword: KeywordPayload) -> DeclarationBlock:
    records = tuple(
        ConnectionDeclaration(
            i1=record.i1,
            j1=record.j1,
            k1=record.k1,
            i2=record.i2,
            j2=record.j2,
            k2=record.k2,
            value=record.value,
        )
        for record in keyword.records
    )
    return DeclarationBlock(
        kind=BlockKind(keyword.name),
        records=records,
        location=KeywordLocation(keyword.name, keyword.file, keyword.line),
    )


def parse_deck(payload: DeckPayloadInput) -> Deck:
    """Build a :class:`Deck` from a decoded JSON document."""

    deck_payload = _ensure_deck_payload(payload)
    deck = Deck()
    for keyword in deck_payload.keywords:
        if keyword.name not in _SUPPORTED_KEYWORDS:
            log.debug(
                "Ignoring unsupported keyword %s at %s:%d",
                keyword.name,
                keyword.file,
                keyword.line,
            )
            continue
        deck.add(_translate_keyword(keyword))
    return deck


def parse_deck_json(text: str) -> Deck:
    try:
        decoded: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeckFormatError(f"Deck is not valid JSON: {exc}") from exc
    if not isinstance(decoded, dict | list):
        raise DeckFormatError("Deck must be a JSON object or array")
    return parse_deck(cast("DeckPayloadInput", decoded))


def load_deck(path: Path) -> Deck:
    log.info("Reading deck from %s", path)
    deck = parse_deck_json(path.read_text(encoding="utf-8"))
    log.info("Deck contains %d connection keyword blocks", len(deck.all_blocks))
    return deck
