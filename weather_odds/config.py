import os
from dotenv import load_dotenv

load_dotenv()

# ── Server ────────────────────────────────────────────────────────────────────
PORT = int(os.environ.get("PORT", 5000))
HOST = os.environ.get("HOST", "0.0.0.0")
DEBUG = os.environ.get("FLASK_DEBUG", "0").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ── NASA POWER ────────────────────────────────────────────────────────────────
NASA_POWER_URL = os.environ.get(
    "NASA_POWER_URL", "https://power.larc.nasa.gov/api/temporal/daily/point"
)
NASA_POWER_COMMUNITY = "AG"
# PRECTOTCORR: precipitation (mm/day), T2M: temperature at 2 m (°C), RH2M: relative humidity (%)
NASA_POWER_PARAMETERS = ("PRECTOTCORR", "T2M", "RH2M")
NASA_TIMEOUT_SECONDS = float(os.environ.get("NASA_TIMEOUT_SECONDS", 30))
MISSING_VALUE = -999.0

# ── Nominatim ─────────────────────────────────────────────────────────────────
NOMINATIM_USER_AGENT = os.environ.get("NOMINATIM_USER_AGENT", "NASA-Weather-App/1.0")
GEOCODE_TIMEOUT_SECONDS = float(os.environ.get("GEOCODE_TIMEOUT_SECONDS", 10))

# ── Scoring window ────────────────────────────────────────────────────────────
WINDOW_HALF_WIDTH_DAYS = 7  # 7 days either side of the prior-year date
MAX_PROBABILITY = 95
