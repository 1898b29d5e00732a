from __future__ import annotations

from typing import Iterable, Protocol

from .types import Cell, SizeClass


class BoardSurface(Protocol):
    """Rozhranie k vykresľovacej ploche (Qt okno alebo pamäťová doska)."""

    def get(self, cell_id: str) -> Cell: ...

    def set_text(self, cell_id: str, text: str) -> None: ...

    def set_size(self, cell_id: str, size: SizeClass | None) -> None: ...

    def set_highlighted(self, cell_id: str, highlighted: bool) -> None: ...

    def clear_all_highlights(self) -> None: ...

    def show_message(self, text: str) -> None: ...


class Board:
    """Pamäťová doska bez UI, pre testy a headless beh."""

    def __init__(self, cells: Iterable[Cell]) -> None:
        self.cells: dict[str, Cell] = {}
        for cell in cells:
            if cell.id in self.cells:
                raise ValueError(f"Duplicitné id bunky: {cell.id}")
            self.cells[cell.id] = cell
        self.message: str = ""

    def get(self, cell_id: str) -> Cell:
        try:
            return self.cells[cell_id]
        except KeyError:
            raise KeyError(f"Neznáma bunka: {cell_id}") from None

    def set_text(self, cell_id: str, text: str) -> None:
        self.get(cell_id).text = text

    def set_size(self, cell_id: str, size: SizeClass | None) -> None:
        self.get(cell_id).size = size

    def set_highlighted(self, cell_id: str, highlighted: bool) -> None:
        self.get(cell_id).highlighted = highlighted

    def clear_all_highlights(self) -> None:
        for cell in self.cells.values():
            cell.highlighted = False

    def show_message(self, text: str) -> None:
        self.message = text

    def highlighted_ids(self) -> list[str]:
        return [cell.id for cell in self.cells.values() if cell.highlighted]

    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells.values() if cell.occupied)
