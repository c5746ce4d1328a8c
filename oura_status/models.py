from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from oura_status.config import BPM_ALERT_THRESHOLD, MINUTES_THRESHOLD


class OuraHeartbeat(BaseModel):
    bpm: int = Field(..., ge=0, le=255, examples=[72])  # rango que reporta el anillo
    source: str = Field(..., examples=["awake"])  # no se usa
    timestamp: datetime = Field(..., examples=["2024-01-15T10:00:00+00:00"])


class OuraResponse(BaseModel):
    data: List[OuraHeartbeat]
    next_token: Optional[str] = None  # paginacion, se ignora


class HeartData(BaseModel):
    bpm: int
    minutes_ago: int = Field(..., ge=0)


class AlertThresholds(BaseModel):
    """Umbrales de alerta; un valor igual al umbral ya alerta."""
    bpm: int = BPM_ALERT_THRESHOLD
    minutes: int = MINUTES_THRESHOLD
