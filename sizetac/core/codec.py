"""Kódovanie stavu bunky do kompaktného tokenu pre validačný server.

Token má tvar ``id + size_suffix + occupant_suffix``, napr. ``"1SX"``:
bunka 1, malá figúrka, obsah "X". Modul je bez UI závislostí.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .board import BoardSurface
from .types import NO_SIZE_SUFFIX, OCCUPANT_SUFFIXES, Cell, SizeClass

log = logging.getLogger("sizetac.core.codec")

BOARD_SEPARATOR = "-"

# Poradie je dôležité: prvá zhoda vyhráva ("XS1" -> SMALL)
SIZE_PATTERNS: tuple[tuple[str, SizeClass], ...] = (
    ("S", SizeClass.SMALL),
    ("M", SizeClass.MEDIUM),
    ("L", SizeClass.LARGE),
)


class TokenDecodeError(ValueError):
    """Token sa nedá rozložiť na id, veľkosť a obsah."""


@dataclass(frozen=True)
class DecodedCell:
    id: str
    size: SizeClass | None
    text: str


def size_suffix(cell: Cell) -> str:
    """S/M/L podľa aktuálnej veľkosti bunky, inak Z."""
    if cell.size is None:
        return NO_SIZE_SUFFIX
    return cell.size.suffix


def occupant_suffix(cell: Cell) -> str:
    """Prázdna bunka -> '0', "X" -> 'X', "O" -> 'Y'.

    Iný text server nepozná; kódujeme ho ako prázdnu bunku.
    """
    suffix = OCCUPANT_SUFFIXES.get(cell.text)
    if suffix is None:
        log.warning("Neznámy obsah bunky id=%s text=%r, kódujem ako prázdnu", cell.id, cell.text)
        return OCCUPANT_SUFFIXES[""]
    return suffix


def encode(cell: Cell) -> str:
    return cell.id + size_suffix(cell) + occupant_suffix(cell)


def encode_board(board: BoardSurface, ids: Iterable[str]) -> str:
    """Zakóduje bunky v danom poradí a spojí ich pomlčkou."""
    return BOARD_SEPARATOR.join(encode(board.get(cell_id)) for cell_id in ids)


def size_label(identifier: str) -> SizeClass | None:
    """Veľkosť, ktorú dostane cieľová bunka po presune z `identifier`.

    Identifikátory palety nesú veľkosť v sebe ("XM2" -> MEDIUM).
    Bez zhody vráti None a veľkosť cieľa sa nemení.
    """
    for pattern, size in SIZE_PATTERNS:
        if pattern in identifier:
            return size
    return None


def decode(token: str) -> DecodedCell:
    """Inverzia k `encode`: posledné dva znaky sú veľkosť a obsah."""
    if len(token) < 3:
        raise TokenDecodeError(f"Token je príliš krátky: {token!r}")
    cell_id, size_char, occupant_char = token[:-2], token[-2], token[-1]
    try:
        size = SizeClass.from_suffix(size_char)
    except ValueError as e:
        raise TokenDecodeError(f"Neznáma veľkosť {size_char!r} v tokene {token!r}") from e
    for text, suffix in OCCUPANT_SUFFIXES.items():
        if suffix == occupant_char:
            return DecodedCell(id=cell_id, size=size, text=text)
    raise TokenDecodeError(f"Neznámy obsah {occupant_char!r} v tokene {token!r}")
