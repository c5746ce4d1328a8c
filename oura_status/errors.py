"""
Errores del programa. Ninguno se recupera: el CLI los reporta y termina con status 1.
"""
from typing import Optional


class HeartStatusError(Exception):
    """Base de todos los errores esperados al calcular la linea de estado."""


class ConfigError(HeartStatusError):
    """Falta configuracion obligatoria (ej: el access token)."""


class TransportError(HeartStatusError):
    """Fallo de red, timeout o respuesta HTTP no exitosa."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DataError(HeartStatusError):
    """El payload no se pudo interpretar."""


class EmptyReadingsError(DataError):
    """La ventana consultada no devolvio ninguna muestra."""


class FutureReadingError(DataError):
    """La ultima lectura tiene timestamp en el futuro."""
