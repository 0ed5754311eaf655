"""
Repository adapters for flight record storage.
"""

from src.flight_routes.adapters.repositories.sqlite_flight_repo import (
    SQLiteFlightRepository,
)

__all__ = [
    "SQLiteFlightRepository",
]
