# profbook/config.py

import os
import warnings
from datetime import time

from dotenv import load_dotenv

load_dotenv()


def _get_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./profbook.db")

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    warnings.warn("SECRET_KEY not set, using the development key", RuntimeWarning, stacklevel=2)
    SECRET_KEY = "change-me-later"
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@profbook.local")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin-password")

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Booking keys are written with January = 0; set false to write the
# 1-indexed keys the slot generator checks against
ZERO_INDEXED_BOOKING_MONTH = _get_bool("ZERO_INDEXED_BOOKING_MONTH", True)

DEPARTMENTS = ["Math", "Engineering", "Business", "Science", "English", "Art"]

slot_settings = {
    "day_start": time(8, 0),
    "day_end": time(18, 0),
    "slot_minutes": 30,
    "window_days": 7,
}
