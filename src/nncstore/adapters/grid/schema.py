"""Pydantic model and loader for JSON grid documents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .cartesian import CartesianGrid, GridFormatError

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


class GridPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    dims: tuple[
        Annotated[int, Field(gt=0)],
        Annotated[int, Field(gt=0)],
        Annotated[int, Field(gt=0)],
    ]
    actnum: list[bool] | None = None

    def to_grid(self) -> CartesianGrid:
        nx, ny, nz = self.dims
        actnum = tuple(self.actnum) if self.actnum is not None else None
        return CartesianGrid(nx, ny, nz, actnum)


def parse_grid_json(text: str) -> CartesianGrid:
    try:
        payload = GridPayload.model_validate_json(text)
    except ValidationError as exc:
        raise GridFormatError(f"Invalid grid document: {exc}") from exc
    return payload.to_grid()


def load_grid(path: Path) -> CartesianGrid:
    grid = parse_grid_json(path.read_text(encoding="utf-8"))
    log.info(
        "Loaded %dx%dx%d grid from %s",
        grid.nx,
        grid.ny,
        grid.nz,
        path,
    )
    return grid
