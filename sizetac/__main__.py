"""Vstupný bod pre spustenie: `python -m sizetac`.

Deleguje na `sizetac.ui.app.main()`.
"""

from __future__ import annotations

from .ui.app import main as _main


def main() -> None:
    """Spustí PySide6 aplikáciu."""

    _main()


if __name__ == "__main__":
    main()
