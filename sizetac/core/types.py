from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SizeClass(Enum):
    """Veľkosť figúrky odvodená od vykreslenej veľkosti písma."""

    SMALL = "S"
    MEDIUM = "M"
    LARGE = "L"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def font_px(self) -> int:
        return _FONT_PX[self]

    @classmethod
    def from_font_px(cls, px: int | None) -> SizeClass | None:
        """Rozpozná veľkosť podľa pixelov; neznáma hodnota -> None."""
        if px is None:
            return None
        for size, known in _FONT_PX.items():
            if known == px:
                return size
        return None

    @classmethod
    def from_suffix(cls, suffix: str) -> SizeClass | None:
        """'S'/'M'/'L' -> SizeClass, 'Z' -> None."""
        if suffix == NO_SIZE_SUFFIX:
            return None
        return cls(suffix)


_FONT_PX: dict[SizeClass, int] = {
    SizeClass.SMALL: 50,
    SizeClass.MEDIUM: 100,
    SizeClass.LARGE: 150,
}

NO_SIZE_SUFFIX = "Z"

# Obsah bunky -> znak v tokene
OCCUPANT_SUFFIXES: dict[str, str] = {
    "": "0",
    "X": "X",
    "O": "Y",
}


@dataclass
class Cell:
    """Jedna klikateľná bunka (paleta alebo hracia plocha)."""

    id: str
    text: str = ""
    size: SizeClass | None = None
    highlighted: bool = False  # iba UI značka, neposiela sa na server

    @property
    def occupied(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class Idle:
    """Nie je vybraná žiadna bunka."""


@dataclass(frozen=True)
class AwaitingDestination:
    """Zdroj je vybraný, čaká sa na klik na cieľovú bunku."""

    source_id: str


SelectionState = Union[Idle, AwaitingDestination]
