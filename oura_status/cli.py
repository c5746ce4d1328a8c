"""
Punto de entrada: imprime una sola linea con el ultimo bpm y hace cuantos minutos se midio.
"""
import sys
from datetime import datetime, timezone
from typing import Optional

from oura_status.display import get_display
from oura_status.errors import HeartStatusError
from oura_status.fetcher import get_access_token, get_bpm_and_minutes_ago
from oura_status.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main(now: Optional[datetime] = None) -> int:
    try:
        token = get_access_token()
        heart_data = get_bpm_and_minutes_ago(token, now or datetime.now(timezone.utc))
    except HeartStatusError as e:
        logger.debug("Abortando sin linea de estado", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(get_display(heart_data))
    return 0


def run() -> None:
    setup_logging()
    sys.exit(main())
