"""
Configuration module for the Flight Routes service.

Loads environment variables (optionally from a .env file) and provides
centralized settings for storage, logging and the HTTP layer.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    """
    Application configuration class.

    Attributes:
        DB_PATH: SQLite database file (":memory:" for a throwaway store).
        LOG_LEVEL: Root logging level for the API process.
        CORS_ORIGINS: Origins allowed by the CORS middleware.
        CODE_LENGTH: Required length of airport codes on flight records.
    """

    DB_PATH: str = os.getenv("FLIGHT_ROUTES_DB_PATH", "data/flights.db")
    LOG_LEVEL: str = os.getenv("FLIGHT_ROUTES_LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: List[str] = _split_origins(
        os.getenv("FLIGHT_ROUTES_CORS_ORIGINS", "*")
    )
    CODE_LENGTH: int = 3
