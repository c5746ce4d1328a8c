"""
Construccion de la ventana de tiempo que se consulta a la API de Oura.
"""
from datetime import datetime, timedelta
from typing import Dict, NamedTuple
from urllib.parse import urlencode

from oura_status.config import CLOCK_SKEW_MINUTES, LOOKBACK_HOURS, OURA_HEARTRATE_URL
from oura_status.errors import ConfigError
from oura_status.util import ensure_utc, format_api_timestamp

LOOKBACK = timedelta(hours=LOOKBACK_HOURS)
CLOCK_SKEW = timedelta(minutes=CLOCK_SKEW_MINUTES)


class TimeWindow(NamedTuple):
    start: datetime
    end: datetime


def build_time_window(
    now: datetime,
    lookback: timedelta = LOOKBACK,
    skew: timedelta = CLOCK_SKEW,
) -> TimeWindow:
    """
    Calcula el intervalo (start, end) a pedir.

    Garantiza start < now <= end. El `end` se corre `skew` hacia adelante para
    tolerar diferencias de reloj con el anillo.

    Raises:
        ConfigError: si lookback no es positivo (OURA_LOOKBACK_HOURS) o skew es
            negativo (OURA_CLOCK_SKEW_MINUTES)
    """
    if lookback <= timedelta(0):
        raise ConfigError(f"OURA_LOOKBACK_HOURS debe ser positivo, ventana recibida: {lookback}")
    if skew < timedelta(0):
        raise ConfigError(f"OURA_CLOCK_SKEW_MINUTES no puede ser negativo, recibido: {skew}")

    now = ensure_utc(now)
    return TimeWindow(start=now - lookback, end=now + skew)


def build_query_params(window: TimeWindow) -> Dict[str, str]:
    return {
        "start_datetime": format_api_timestamp(window.start),
        "end_datetime": format_api_timestamp(window.end),
    }


def build_heartrate_url(window: TimeWindow, base_url: str = OURA_HEARTRATE_URL) -> str:
    """URL completa del request (la usa el log en modo debug)."""
    return f"{base_url}?{urlencode(build_query_params(window))}"
