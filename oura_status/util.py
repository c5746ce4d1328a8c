"""
Utilidades para conversión de fechas y timestamps.
"""
from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    """
    Normaliza un datetime a UTC.

    Args:
        dt: datetime object (si no tiene tzinfo, se asume UTC)

    Returns:
        datetime con tzinfo UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_api_timestamp(dt: datetime) -> str:
    """
    Convierte un datetime al formato que acepta la API de Oura.

    Args:
        dt: datetime object (si no tiene tzinfo, se asume UTC)

    Returns:
        String ISO 8601 en UTC con precision de segundos (YYYY-MM-DDTHH:MM:SS+00:00)
    """
    return ensure_utc(dt).replace(microsecond=0).isoformat()


def minutes_between(earlier: datetime, later: datetime) -> int:
    """
    Minutos enteros transcurridos entre dos instantes, truncados hacia cero.

    Un resultado negativo significa que `earlier` esta en el futuro respecto de `later`.
    """
    delta = ensure_utc(later) - ensure_utc(earlier)
    return int(delta.total_seconds() / 60)
