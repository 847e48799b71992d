import os
import sys
from dotenv import load_dotenv

load_dotenv()


def _int_env(name, default):
    try:
        return int(os.getenv(name, default))
    except ValueError:
        sys.exit(f"{name} must be an integer")


PORT = _int_env("PORT", 3000)
API_HOST = os.getenv("API_HOST", "0.0.0.0")

DOOR_OPEN_DURATION = _int_env("DOOR_OPEN_DURATION", 60)  # seconds
if DOOR_OPEN_DURATION <= 0:
    sys.exit("DOOR_OPEN_DURATION must be a positive number of seconds")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOGS_DIR = os.getenv("LOGS_DIR", "logs")

PUBLIC_DIR = os.getenv(
    "PUBLIC_DIR",
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "public"),
)

CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]

DOOR_API_URL = os.getenv("DOOR_API_URL", f"http://localhost:{PORT}")
