"""Konfigurácia a flagy pre sizetac.

Pravidlá:
- SIZETAC_HOST -> prepíše adresu validačného servera z layout.json.
- SIZETAC_TIMEOUT_SECONDS -> timeout HTTP volania; chýba = bez timeoutu.
- SIZETAC_SEQUENCE_RESPONSES='0' -> vypne zahadzovanie starších odpovedí.
"""
from __future__ import annotations

import logging
import os
from contextlib import suppress

from dotenv import load_dotenv

log = logging.getLogger("sizetac.config")

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenné
if os.getenv("PYTEST_CURRENT_TEST") is None:
    with suppress(OSError):
        load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Bezpečné parsovanie boolean reťazcov; None ak neznáme."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def host_override() -> str | None:
    """Adresa servera z prostredia, ak je zadaná a neprázdna."""
    value = (os.getenv("SIZETAC_HOST") or "").strip()
    return value or None


def request_timeout() -> float | None:
    """Timeout v sekundách; neplatná alebo chýbajúca hodnota -> None (bez timeoutu)."""
    raw = os.getenv("SIZETAC_TIMEOUT_SECONDS")
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        log.warning("Neplatný SIZETAC_TIMEOUT_SECONDS=%r, ignorujem", raw)
        return None
    return value if value > 0 else None


def sequence_responses() -> bool:
    """Či zahadzovať odpovede staršie než posledná vykreslená (predvolene áno)."""
    env_val = _parse_bool(os.getenv("SIZETAC_SEQUENCE_RESPONSES"))
    if env_val is False:
        return False
    return True
