import os
from typing import Optional

from dotenv import load_dotenv

# Values come from the environment; a local .env file is loaded first if present
load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)


def _optional_int_env(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return int(value)


APP_TITLE = os.getenv("APP_TITLE", "Hotel Booking API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 8000)

# Seeding: hotel count drawn from [SEED_MIN_HOTELS, SEED_MAX_HOTELS)
SEED_MIN_HOTELS = _int_env("SEED_MIN_HOTELS", 10)
SEED_MAX_HOTELS = _int_env("SEED_MAX_HOTELS", 40)
ROOMS_PER_HOTEL = _int_env("ROOMS_PER_HOTEL", 6)
SEED_RANDOM_SEED = _optional_int_env("SEED_RANDOM_SEED")

BOOKING_REFERENCE_MAX_ATTEMPTS = _int_env("BOOKING_REFERENCE_MAX_ATTEMPTS", 5)
