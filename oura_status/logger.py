"""
Configuración de logging para la aplicación.
"""
import logging
import sys
from typing import Optional

from oura_status.config import LOG_LEVEL


def setup_logging(log_level: Optional[str] = None) -> None:
    if log_level is None:
        log_level = LOG_LEVEL
    log_level = log_level.upper()

    numeric_level = getattr(logging, log_level, logging.WARNING)

    # Formato de log: timestamp - nivel - módulo - mensaje
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    # stderr: la salida estandar es solo para la linea de estado
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
