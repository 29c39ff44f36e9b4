"""Jerarquia de errores del dominio.

Lleno y no encontrado no son errores: el core los senala con None.
"""


class DomainError(Exception):
    """Error base del simulador."""
    pass


class ValidationError(DomainError):
    """Entrada invalida para el core (p. ej. capacidad no positiva)."""
    pass


class CommandError(DomainError):
    """Comando de texto mal formado. El mensaje es la linea a mostrar."""
    pass
