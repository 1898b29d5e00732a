"""Odpoveď validačného servera.

Server vracia riedky JSON objekt; každé pole je voliteľné a typ hodnôt
nie je pevne daný, preto ich držíme ako `Any` a vykresľujeme ich tak
ako webový klient (`_format_value`).
Neznáme kľúče sa ticho ignorujú (dopredná kompatibilita).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

LINE_BREAK = "\n"


class ValidationResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    Message: Any = None
    Winner: Any = None
    Winnings: Any = None
    xPosition: Any = None
    xValues: Any = None
    yPosition: Any = None
    yValues: Any = None
    Error: Any = None

    @classmethod
    def from_payload(cls, data: Any) -> ValidationResponse:
        """Skopíruje iba známe polia; iný typ než objekt je chyba."""
        if not isinstance(data, dict):
            raise ValueError(f"Odpoveď musí byť JSON objekt, prišlo {type(data).__name__}")
        return cls.model_validate(data)

    def present_fields(self) -> list[tuple[str, Any]]:
        """(meno, hodnota) vyplnených polí v deklarovanom poradí."""
        out: list[tuple[str, Any]] = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None or value == "":
                continue
            out.append((name, value))
        return out

    def render(self) -> str:
        return LINE_BREAK.join(f"{name}: {_format_value(value)}" for name, value in self.present_fields())


def _format_value(value: Any) -> str:
    """Zobrazí hodnotu tak, ako ju zobrazuje webový klient servera.

    true/false malými písmenami, zoznamy spojené čiarkou (null v zozname je
    prázdny reťazec), celé čísla typu float bez ".0", objekty ako
    "[object Object]".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)
