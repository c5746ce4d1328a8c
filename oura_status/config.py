"""
Configuración centralizada del sistema.
Todas las constantes y configuraciones del proyecto están definidas aquí.
"""
import os

# ============================================================================
# Oura API Configuration
# ============================================================================
OURA_API_BASE_URL = os.getenv("OURA_API_BASE_URL", "https://api.ouraring.com").rstrip("/")
OURA_HEARTRATE_URL = f"{OURA_API_BASE_URL}/v2/usercollection/heartrate"
# nombre de la variable de entorno con el bearer token (se lee en el arranque, no aca)
ACCESS_TOKEN_ENV = "OURA_ACCESS_TOKEN"
REQUEST_TIMEOUT = float(os.getenv("OURA_REQUEST_TIMEOUT", "10.0"))  # segundos

# ============================================================================
# Query Window Configuration
# ============================================================================
LOOKBACK_HOURS = int(os.getenv("OURA_LOOKBACK_HOURS", "24"))
CLOCK_SKEW_MINUTES = int(os.getenv("OURA_CLOCK_SKEW_MINUTES", "1"))

# ============================================================================
# Alert Thresholds
# ============================================================================
BPM_ALERT_THRESHOLD = int(os.getenv("BPM_ALERT_THRESHOLD", "80"))  # bpm >= esto -> alerta
MINUTES_THRESHOLD = int(os.getenv("MINUTES_THRESHOLD", "60"))  # lectura vieja -> alerta

# ============================================================================
# Logging Configuration
# ============================================================================
# stdout queda reservado para la linea de estado
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
