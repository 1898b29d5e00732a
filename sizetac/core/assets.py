"""Cesty k dátam balíka sizetac.

`assets/layout.json` nesie adresu validačného servera, id palety a hracej
plochy a počiatočné tokeny; `load_layout()` ho číta odtiaľto.
"""

from __future__ import annotations

from pathlib import Path


def get_assets_path() -> Path:
    """Vráti cestu k priečinku `assets/` v balíku."""

    return Path(__file__).resolve().parent.parent / "assets"


def get_layout_path() -> Path:
    """Úplná cesta k predvolenému `layout.json`."""

    return get_assets_path() / "layout.json"
