"""Klikateľné bunky a Qt implementácia `BoardSurface`.

Veľkosť bunky sa vždy číta z aktuálne nastaveného písma widgetu,
nie z cache, lebo presun ju môže zmeniť.
"""

from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QMouseEvent
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

from ..core.types import Cell, SizeClass

_BASE_STYLE = "background: #f4f4f4; color: #202020; border: 2px solid #b0b0b0;"
_HIGHLIGHT_STYLE = "background: #fff3b0; color: #202020; border: 3px solid #e0a000;"
_DEFAULT_FONT_PT = 24


class CellLabel(QLabel):
    """Jedna bunka palety alebo dosky."""

    clicked: Signal = Signal(str)

    def __init__(self, cell_id: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.cell_id = cell_id
        self._highlighted = False
        self.setObjectName(cell_id)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumSize(64, 64)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.set_size(None)
        self.set_highlighted(False)

    def mousePressEvent(self, ev: QMouseEvent) -> None:  # noqa: N802
        if ev.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.cell_id)
        super().mousePressEvent(ev)

    def size_class(self) -> SizeClass | None:
        # pixelSize() je -1, ak písmo nemá nastavenú veľkosť v px
        return SizeClass.from_font_px(self.font().pixelSize())

    def set_size(self, size: SizeClass | None) -> None:
        f = QFont(self.font())
        f.setBold(True)
        if size is None:
            f.setPointSize(_DEFAULT_FONT_PT)
        else:
            f.setPixelSize(size.font_px)
        self.setFont(f)

    def is_highlighted(self) -> bool:
        return self._highlighted

    def set_highlighted(self, highlighted: bool) -> None:
        self._highlighted = highlighted
        self.setStyleSheet(_HIGHLIGHT_STYLE if highlighted else _BASE_STYLE)

    def snapshot(self) -> Cell:
        return Cell(
            id=self.cell_id,
            text=self.text(),
            size=self.size_class(),
            highlighted=self._highlighted,
        )


class QtBoard:
    """`BoardSurface` nad widgetmi; správy idú do jedného QLabel."""

    def __init__(self, cells: Iterable[CellLabel], message_label: QLabel) -> None:
        self.widgets: dict[str, CellLabel] = {w.cell_id: w for w in cells}
        self.message_label = message_label

    def widget(self, cell_id: str) -> CellLabel:
        try:
            return self.widgets[cell_id]
        except KeyError:
            raise KeyError(f"Neznáma bunka: {cell_id}") from None

    def get(self, cell_id: str) -> Cell:
        return self.widget(cell_id).snapshot()

    def set_text(self, cell_id: str, text: str) -> None:
        self.widget(cell_id).setText(text)

    def set_size(self, cell_id: str, size: SizeClass | None) -> None:
        self.widget(cell_id).set_size(size)

    def set_highlighted(self, cell_id: str, highlighted: bool) -> None:
        self.widget(cell_id).set_highlighted(highlighted)

    def clear_all_highlights(self) -> None:
        for w in self.widgets.values():
            if w.is_highlighted():
                w.set_highlighted(False)

    def show_message(self, text: str) -> None:
        self.message_label.setText(text)

    def load_cells(self, cells: Iterable[Cell]) -> None:
        """Prepíše widgety podľa buniek (reštart hry)."""
        for cell in cells:
            w = self.widget(cell.id)
            w.setText(cell.text)
            w.set_size(cell.size)
            w.set_highlighted(cell.highlighted)
        self.message_label.clear()
