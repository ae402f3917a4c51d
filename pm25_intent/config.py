import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (one level above pm25_intent/)
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

PM25_API_URL = os.getenv(
    "PM25_API_URL", "https://pm25.gistda.or.th/rest/getPm25byLocation"
)
PM25_PROFILE = os.getenv("PM25_PROFILE", "thai")
PM25_LOCALE = os.getenv("PM25_LOCALE", "th")

REQUEST_TIMEOUT = float(os.getenv("PM25_REQUEST_TIMEOUT", "10.0"))
LOCATION_ATTEMPTS = int(os.getenv("PM25_LOCATION_ATTEMPTS", "10"))
LOCATION_INTERVAL = float(os.getenv("PM25_LOCATION_INTERVAL", "0.5"))


def _optional_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return float(value)


DEFAULT_LATITUDE = _optional_float("PM25_DEFAULT_LATITUDE")
DEFAULT_LONGITUDE = _optional_float("PM25_DEFAULT_LONGITUDE")

PM25_PORT = int(os.getenv("PM25_PORT", "8000"))
FRONTEND_PORT = int(os.getenv("FRONTEND_PORT", "8501"))
