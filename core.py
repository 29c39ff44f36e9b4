"""
Core del simulador de parking.

Un unico aparcamiento en memoria: asignacion de la plaza libre mas cercana,
liberacion con calculo de tarifa y listado de estado ordenado por plaza.
"""

from __future__ import annotations

from typing import Any, Dict, List

from parking_sim.config import FeeSchedule
from parking_sim.core.errors import ValidationError
from parking_sim.core.models import Receipt, Vehicle

__version__ = "0.2.0"


DEFAULT_FEES = FeeSchedule()


def calculate_charge(hours: int, fees: FeeSchedule | None = None) -> int:
    """Tarifa por estancia: tarifa base hasta `base_hours`, luego por hora."""
    f = fees or DEFAULT_FEES
    if hours <= f.base_hours:
        return f.base_rate
    return f.base_rate + (hours - f.base_hours) * f.hourly_rate


class ParkingLot:
    """Registro en memoria: numero de plaza -> vehiculo.

    Las plazas van de 1 a `capacity`. Una clave ausente significa plaza libre.
    """

    def __init__(self, capacity: int, fees: FeeSchedule | None = None) -> None:
        self._fees = fees or DEFAULT_FEES
        self._capacity = 0
        self._slots: Dict[int, Vehicle] = {}
        self.initialize(capacity)

    def initialize(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValidationError("capacity debe ser un entero >= 1")
        self._capacity = capacity
        self._slots = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self._capacity

    def free_slots(self) -> List[int]:
        return [i for i in range(1, self._capacity + 1) if i not in self._slots]

    def park(self, registration: str) -> int | None:
        """Ocupa la plaza libre de numero mas bajo. None si esta lleno."""
        if self.is_full():
            return None
        slot = 1
        while slot in self._slots:
            slot += 1
        self._slots[slot] = Vehicle(registration=registration, slot=slot)
        return slot

    def leave(self, registration: str, hours: int) -> Receipt | None:
        """Libera la plaza del vehiculo y devuelve el recibo, o None.

        Con matriculas duplicadas se libera la plaza de numero mas bajo.
        """
        for slot in sorted(self._slots):
            if self._slots[slot].registration == registration:
                charge = calculate_charge(hours, self._fees)
                del self._slots[slot]
                return Receipt(registration=registration, slot=slot, charge=charge)
        return None

    def status(self) -> List[Vehicle]:
        # el dict no garantiza orden por plaza
        return [self._slots[s] for s in sorted(self._slots)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "capacity": self._capacity,
            "slots": [{"slot": v.slot, "registration": v.registration} for v in self.status()],
        }
