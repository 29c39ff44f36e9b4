"""Configuracion del simulador.

Tarifas con los valores fijos del aparcamiento y ajustes del servidor HTTP,
estos ultimos sobreescribibles por variables de entorno.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class FeeSchedule:
    """Tarifa plana `base_rate` hasta `base_hours`, despues `hourly_rate` por hora."""
    base_rate: int = 10
    base_hours: int = 2
    hourly_rate: int = 10


@dataclass
class ServerConfig:
    """Config para la app web."""
    host: str = "127.0.0.1"
    port: int = 5000
    # 0: arrancar sin aparcamiento (hay que crearlo via POST /api/lot)
    capacity: int = 0

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            host=os.environ.get("HOST", cls.host),
            port=_env_int("PORT", cls.port),
            capacity=max(0, _env_int("CAPACITY", cls.capacity)),
        )
