"""
web_app.py
=================

App Flask que expone un unico aparcamiento por HTTP/JSON.

Contratos:
- GET  /health -> {"ok": true, "version": str}
- POST /api/lot {"capacity": int} -> {"ok": true, "capacity": int}
- POST /api/park {"registration": str} -> {"ok": true, "slot": int}
- POST /api/leave {"registration": str, "hours": int}
  -> {"ok": true, "registration": str, "slot": int, "charge": int}
- GET  /api/status -> {"capacity": int, "slots": [{"slot": int, "registration": str}, ...]}

Configuracion por variables de entorno (opcionales): HOST, PORT, CAPACITY.
"""

from __future__ import annotations

import threading
from typing import Any

from flask import Flask, jsonify, request, Response

from core import ParkingLot, __version__
from parking_sim.config import ServerConfig
from parking_sim.core.errors import ValidationError
from parking_sim.core.interpreter import NOT_INITIALIZED


class LotHolder:
    """Aparcamiento compartido entre peticiones, protegido por un lock."""

    def __init__(self, capacity: int = 0) -> None:
        self.lock = threading.Lock()
        self.lot: ParkingLot | None = ParkingLot(capacity) if capacity > 0 else None


def _payload() -> dict[str, Any] | None:
    # solo objetos JSON; listas o escalares son peticion invalida
    payload = request.get_json(silent=True) or {}
    return payload if isinstance(payload, dict) else None


def _registration(payload: dict[str, Any]) -> str | None:
    reg = payload.get("registration")
    if not isinstance(reg, str) or not reg:
        return None
    return reg


def _as_int(value: Any) -> int | None:
    # bool es subclase de int
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def create_app(config: ServerConfig | None = None) -> Flask:
    cfg = config or ServerConfig.from_env()
    app = Flask(__name__)
    holder = LotHolder(cfg.capacity)
    app.config["LOT_HOLDER"] = holder

    @app.get("/health")
    def health() -> Response:
        return jsonify({"ok": True, "version": __version__})

    @app.post("/api/lot")
    def api_lot() -> Any:
        """Crea (o recrea, vaciandolo) el aparcamiento."""
        payload = _payload()
        if payload is None:
            return jsonify({"error": "JSON object required"}), 400
        capacity = _as_int(payload.get("capacity"))
        if capacity is None:
            return jsonify({"error": "Invalid capacity"}), 400
        with holder.lock:
            try:
                holder.lot = ParkingLot(capacity)
            except ValidationError:
                return jsonify({"error": "Invalid capacity"}), 400
        return jsonify({"ok": True, "capacity": capacity})

    @app.post("/api/park")
    def api_park() -> Any:
        payload = _payload()
        if payload is None:
            return jsonify({"error": "JSON object required"}), 400
        reg = _registration(payload)
        if reg is None:
            return jsonify({"error": "Invalid registration"}), 400
        with holder.lock:
            if holder.lot is None:
                return jsonify({"error": NOT_INITIALIZED}), 409
            slot = holder.lot.park(reg)
        if slot is None:
            return jsonify({"error": "Sorry, parking lot is full"}), 409
        return jsonify({"ok": True, "slot": slot})

    @app.post("/api/leave")
    def api_leave() -> Any:
        payload = _payload()
        if payload is None:
            return jsonify({"error": "JSON object required"}), 400
        reg = _registration(payload)
        hours = _as_int(payload.get("hours"))
        if reg is None:
            return jsonify({"error": "Invalid registration"}), 400
        if hours is None:
            return jsonify({"error": "Invalid hours"}), 400
        with holder.lock:
            if holder.lot is None:
                return jsonify({"error": NOT_INITIALIZED}), 409
            receipt = holder.lot.leave(reg, hours)
        if receipt is None:
            return jsonify({"error": f"Registration number {reg} not found"}), 404
        return jsonify({"ok": True, **receipt.to_dict()})

    @app.get("/api/status")
    def api_status() -> Any:
        with holder.lock:
            if holder.lot is None:
                return jsonify({"error": NOT_INITIALIZED}), 409
            return jsonify(holder.lot.to_dict())

    return app


def main() -> None:
    """Punto de entrada: arranca la app con la config del entorno."""
    cfg = ServerConfig.from_env()
    create_app(cfg).run(host=cfg.host, port=cfg.port, debug=False)


if __name__ == "__main__":
    main()
