"""Public interface for the JSON deck adapter."""

from __future__ import annotations

from .schema import DeckPayload, DeckPayloadInput, KeywordPayload, RecordPayload
from .translator import DeckFormatError, load_deck, parse_deck, parse_deck_json

__all__ = [
    "DeckFormatError",
    "DeckPayload",
    "DeckPayloadInput",
    "KeywordPayload",
    "RecordPayload",
    "load_deck",
    "parse_deck",
    "parse_deck_json",
]
