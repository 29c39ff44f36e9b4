from __future__ import annotations

"""Modelos del simulador (value objects) en formato simple."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """Vehiculo aparcado. `slot` repite la clave del registro."""
    registration: str
    slot: int


@dataclass(frozen=True)
class Receipt:
    """Resultado de una salida: plaza liberada y cargo."""
    registration: str
    slot: int
    charge: int

    def to_dict(self) -> dict:
        return {"registration": self.registration, "slot": self.slot, "charge": self.charge}
