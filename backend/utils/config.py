from dotenv import load_dotenv
import os

load_dotenv()

QUICKCOURT_API_URL = os.getenv("QUICKCOURT_API_URL", "http://localhost:5000/api").rstrip("/")
QUICKCOURT_API_TIMEOUT = float(os.getenv("QUICKCOURT_API_TIMEOUT", "10.0"))
ADVANCE_BOOKING_DAYS = int(os.getenv("QUICKCOURT_ADVANCE_BOOKING_DAYS", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "QUICKCOURT_CORS_ORIGINS", "http://localhost:5000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

MAX_NOTES_LENGTH = 500
