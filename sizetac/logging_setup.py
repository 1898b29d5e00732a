"""Logovanie ťahov a validačných volaní sizetac.

Každý dokončený presun dostane krátke trace-id (`TRACE_ID_VAR`), ktoré
nesú záznamy výberu, kódovania dosky aj HTTP volania vo worker vlákne.
Výstup ide do Rich konzoly a do rotovaného `sizetac.log`; súbor s
plným trace-id si dá presmerovať cez `SIZETAC_LOG_PATH`.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

# Kontextové ID ťahu, nastavuje ho UI pri každom dokončenom presune
TRACE_ID_VAR: ContextVar[str] = ContextVar("trace_id", default="-")


class _TraceIdFilter(logging.Filter):
    """Filter doplní `trace_id` do každého záznamu z ContextVar."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = TRACE_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Predvolená cesta k log súboru: koreň repozitára (`sizetac.log`).

    Možno prepísať premennou prostredia `SIZETAC_LOG_PATH`.
    """

    env = os.getenv("SIZETAC_LOG_PATH")
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "sizetac.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger."""

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("sizetac")

    root.setLevel(logging.DEBUG)
    trace_filter = _TraceIdFilter()

    # Konzola
    ch = RichHandler(rich_tracebacks=True)
    ch.setLevel(level)
    ch.addFilter(trace_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Súbor s rotáciou
    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as e:
        # Bez súboru pokračuj aspoň s konzolou
        logging.getLogger("sizetac").warning("Log súbor %s sa nedá otvoriť: %s", path, e)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(trace_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [trace=%(trace_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("sizetac")
