"""Statická konfigurácia hry: adresa servera, množiny id a počiatočná doska.

Layout sa validuje pri načítaní, nie pri každom kliku:
- `source_ids` a `destination_ids` musia byť disjunktné,
- každé zdrojové id musí niesť veľkosť (S/M/L),
- `initial_cells` musia byť platné tokeny a pokryť všetky id.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .. import config
from .assets import get_layout_path
from .board import Board
from .codec import TokenDecodeError, decode, size_label
from .types import Cell

log = logging.getLogger("sizetac.core.layout")


class LayoutError(Exception):
    """Neplatná statická konfigurácia hry."""


class GameLayout(BaseModel):
    host: str
    source_ids: list[str] = Field(..., min_length=1)
    destination_ids: list[str] = Field(..., min_length=1)
    initial_cells: list[str] = Field(default_factory=list)

    @field_validator("host")
    @classmethod
    def _strip_host(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if not s:
            raise ValueError("host_must_not_be_empty")
        return s

    @field_validator("source_ids", "destination_ids")
    @classmethod
    def _unique_ids(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError("duplicate_ids")
        return v

    @field_validator("initial_cells")
    @classmethod
    def _tokens_decode(cls, v: list[str]) -> list[str]:
        for token in v:
            try:
                decode(token)
            except TokenDecodeError as e:
                raise ValueError(str(e)) from e
        return v

    @model_validator(mode="after")
    def _check_sets(self) -> "GameLayout":
        overlap = set(self.source_ids) & set(self.destination_ids)
        if overlap:
            raise ValueError(f"source_and_destination_overlap: {sorted(overlap)}")
        unsized = [sid for sid in self.source_ids if size_label(sid) is None]
        if unsized:
            raise ValueError(f"source_ids_without_size: {unsized}")
        if self.initial_cells:
            declared = [decode(t).id for t in self.initial_cells]
            if sorted(declared) != sorted(self.all_ids()):
                raise ValueError("initial_cells_must_cover_all_ids")
        return self

    def all_ids(self) -> list[str]:
        return [*self.source_ids, *self.destination_ids]

    def build_cells(self) -> list[Cell]:
        """Čerstvé bunky podľa `initial_cells`; chýbajúce sú prázdne bez veľkosti."""
        cells: dict[str, Cell] = {cid: Cell(id=cid) for cid in self.all_ids()}
        for token in self.initial_cells:
            decoded = decode(token)
            cells[decoded.id] = Cell(id=decoded.id, text=decoded.text, size=decoded.size)
        return list(cells.values())

    def build_board(self) -> Board:
        return Board(self.build_cells())


def load_layout(path: str | Path | None = None) -> GameLayout:
    """Načíta a zvaliduje layout; SIZETAC_HOST prepíše `host`."""
    p = Path(path) if path is not None else get_layout_path()
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise LayoutError(f"Layout sa nedá načítať z {p}: {e}") from e
    if not isinstance(data, dict):
        raise LayoutError(f"Layout {p} musí byť JSON objekt")

    override = config.host_override()
    if override:
        data["host"] = override
    try:
        layout = GameLayout.model_validate(data)
    except ValidationError as e:
        raise LayoutError(f"Neplatný layout {p}: {e}") from e

    log.info(
        "layout_loaded path=%s host=%s sources=%d destinations=%d",
        p,
        layout.host,
        len(layout.source_ids),
        len(layout.destination_ids),
    )
    return layout
