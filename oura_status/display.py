from typing import Optional

from oura_status.models import AlertThresholds, HeartData


def alert_wrap(content: str) -> str:
    return f">>>>> {content} <<<<<"


def get_display(heart_data: HeartData, thresholds: Optional[AlertThresholds] = None) -> str:
    """
    Arma la linea de estado "<bpm> | <minutos>m".

    Cada campo se envuelve con alert_wrap cuando alcanza su umbral (>=).
    """
    if thresholds is None:
        thresholds = AlertThresholds()

    bpm = str(heart_data.bpm)
    if heart_data.bpm >= thresholds.bpm:
        bpm = alert_wrap(bpm)

    minutes = f"{heart_data.minutes_ago}m"
    if heart_data.minutes_ago >= thresholds.minutes:
        minutes = alert_wrap(minutes)  # dato viejo

    return f"{bpm} | {minutes}"
