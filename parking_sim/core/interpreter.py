from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from core import ParkingLot
from parking_sim.config import FeeSchedule
from parking_sim.core.errors import CommandError, ValidationError

INT_RE = re.compile(r"[+-]?[0-9]+")

NOT_INITIALIZED = "Parking lot not initialized"
STATUS_HEADER = "Slot No. Registration No."


def _parse_int(token: str, message: str) -> int:
    if not INT_RE.fullmatch(token):
        raise CommandError(message)
    return int(token)


class CommandInterpreter:
    """Interpreta comandos de texto, uno por linea, contra un aparcamiento.

    `lot` es None hasta el primer create_parking_lot.
    """

    def __init__(self, fees: FeeSchedule | None = None) -> None:
        self._fees = fees
        self.lot: ParkingLot | None = None

    def _require_lot(self) -> ParkingLot:
        if self.lot is None:
            raise CommandError(NOT_INITIALIZED)
        return self.lot

    def execute(self, line: str) -> List[str]:
        """Ejecuta una linea y devuelve las lineas de salida (puede ser vacia)."""
        parts = line.split()
        if not parts:
            return []
        command, args = parts[0], parts[1:]
        handler = getattr(self, "_cmd_" + command, None)
        if handler is None:
            return [f"Unknown command: {command}"]
        try:
            return handler(args)
        except CommandError as e:
            return [str(e)]

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield from self.execute(line)

    def _cmd_create_parking_lot(self, args: List[str]) -> List[str]:
        if len(args) != 1:
            raise CommandError("Invalid create_parking_lot command")
        capacity = _parse_int(args[0], "Invalid capacity")
        try:
            self.lot = ParkingLot(capacity, self._fees)
        except ValidationError:
            raise CommandError("Invalid capacity")
        return []

    def _cmd_park(self, args: List[str]) -> List[str]:
        if len(args) != 1:
            raise CommandError("Invalid park command")
        slot = self._require_lot().park(args[0])
        if slot is None:
            return ["Sorry, parking lot is full"]
        return [f"Allocated slot number: {slot}"]

    def _cmd_leave(self, args: List[str]) -> List[str]:
        if len(args) != 2:
            raise CommandError("Invalid leave command")
        lot = self._require_lot()
        registration = args[0]
        hours = _parse_int(args[1], "Invalid hours")
        receipt = lot.leave(registration, hours)
        if receipt is None:
            return [f"Registration number {registration} not found"]
        return [
            f"Registration number {receipt.registration} with Slot Number {receipt.slot}"
            f" is free with Charge ${receipt.charge}"
        ]

    def _cmd_status(self, args: List[str]) -> List[str]:
        rows = self._require_lot().status()
        if not rows:
            return []
        return [STATUS_HEADER] + [f"{v.slot} {v.registration}" for v in rows]
