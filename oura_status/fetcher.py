# oura_status/fetcher.py
"""
Obtencion de la ultima lectura de heart rate desde la API v2 de Oura.
Un solo GET, sin reintentos: cualquier falla se propaga como HeartStatusError.
"""
import os
from datetime import datetime
from typing import Optional

import requests
from pydantic import ValidationError

from oura_status.config import ACCESS_TOKEN_ENV, OURA_HEARTRATE_URL, REQUEST_TIMEOUT
from oura_status.errors import (
    ConfigError,
    DataError,
    EmptyReadingsError,
    FutureReadingError,
    TransportError,
)
from oura_status.logger import get_logger
from oura_status.models import HeartData, OuraHeartbeat, OuraResponse
from oura_status.util import minutes_between
from oura_status.window import TimeWindow, build_heartrate_url, build_query_params, build_time_window

logger = get_logger(__name__)


def get_access_token() -> str:
    """
    Lee el bearer token de la variable de entorno OURA_ACCESS_TOKEN.

    Raises:
        ConfigError: si la variable no existe o esta vacia
    """
    token = os.getenv(ACCESS_TOKEN_ENV, "").strip()
    if not token:
        raise ConfigError(f"Falta la variable de entorno {ACCESS_TOKEN_ENV}")
    return token


def fetch_heartrate(
    token: str,
    window: TimeWindow,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> OuraResponse:
    """
    Hace el GET a /v2/usercollection/heartrate para la ventana dada.

    Args:
        token: bearer token de Oura
        window: intervalo a consultar
        session: requests.Session opcional (por defecto se usa el modulo requests)
        timeout: segundos maximos de espera

    Returns:
        OuraResponse validado

    Raises:
        TransportError: error de conexion, timeout o status no exitoso
        DataError: body que no es JSON o no respeta el esquema (validacion estricta)
    """
    http = session or requests
    logger.debug(f"GET {build_heartrate_url(window)}")

    try:
        response = http.get(
            OURA_HEARTRATE_URL,
            params=build_query_params(window),
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.debug(f"Error de red consultando Oura: {e}")
        raise TransportError(f"No se pudo conectar con la API de Oura: {e}") from e

    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        logger.debug(f"Oura respondio con status {response.status_code}")
        raise TransportError(
            f"La API de Oura respondio {response.status_code}",
            status_code=response.status_code,
        ) from e

    # modo estricto JSON: "72", true, epoch o fechas sin hora no son lecturas validas
    try:
        return OuraResponse.model_validate_json(response.content, strict=True)
    except ValidationError as e:
        logger.debug(f"Payload de Oura invalido: {e}")
        raise DataError(f"Payload de Oura invalido: {e}") from e


def latest_reading(response: OuraResponse) -> OuraHeartbeat:
    """
    Devuelve la ultima muestra del payload.
    Se confia en que la API las devuelve ordenadas cronologicamente.
    """
    if not response.data:
        raise EmptyReadingsError("Oura no devolvio muestras de heart rate en la ventana consultada")
    return response.data[-1]


def compute_heart_data(reading: OuraHeartbeat, now: datetime) -> HeartData:
    """
    Calcula cuantos minutos pasaron desde la lectura.

    Raises:
        FutureReadingError: si la lectura esta al menos un minuto en el futuro
    """
    minutes_ago = minutes_between(reading.timestamp, now)
    if minutes_ago < 0:
        raise FutureReadingError(
            f"La ultima lectura ({reading.timestamp.isoformat()}) esta {-minutes_ago}m en el futuro"
        )
    return HeartData(bpm=reading.bpm, minutes_ago=minutes_ago)


def get_bpm_and_minutes_ago(
    token: str,
    now: datetime,
    session: Optional[requests.Session] = None,
) -> HeartData:
    """Pipeline completo: ventana -> GET -> ultima muestra -> HeartData."""
    window = build_time_window(now)
    response = fetch_heartrate(token, window, session=session)
    reading = latest_reading(response)
    logger.info(f"Ultima lectura - bpm: {reading.bpm}, timestamp: {reading.timestamp.isoformat()}")
    return compute_heart_data(reading, now)
