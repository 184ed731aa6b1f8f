"""Pydantic models describing the JSON deck document."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_RECORD_FIELDS = ("i1", "j1", "k1", "i2", "j2", "k2", "value")
DEFAULT_DECK_FILENAME = "<memory>"


class DeckBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RecordPayload(DeckBaseModel):
    i1: int
    j1: int
    k1: int
    i2: int
    j2: int
    k2: int
    value: float

    @model_validator(mode="before")
    @classmethod
    def _normalize_positional_schema(cls, value: object) -> object:
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            items = cast(Sequence[object], value)
            if len(items) != len(_RECORD_FIELDS):
                raise ValueError(
                    f"Positional record needs {len(_RECORD_FIELDS)} items, got {len(items)}"
                )
            return dict(zip(_RECORD_FIELDS, items, strict=True))
        return value


class KeywordPayload(DeckBaseModel):
    name: str
    file: str = DEFAULT_DECK_FILENAME
    line: int = 0
    records: list[RecordPayload] = Field(default_factory=list["RecordPayload"])

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class DeckPayload(DeckBaseModel):
    keywords: list[KeywordPayload] = Field(default_factory=list["KeywordPayload"])

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_keyword_list(cls, value: object) -> object:
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            return {"keywords": value}
        return value


type DeckPayloadInput = DeckPayload | Mapping[str, object] | Sequence[object]
