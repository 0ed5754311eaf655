"""
Fixtures for FastAPI endpoint tests.

Every test gets a FlightRoutes facade over a fresh in-memory database,
patched into the API module in place of the configured one.
"""

from unittest.mock import patch

import pytest

from src.flight_routes.application import FlightRoutes
from src.flight_routes.schemas.flight import FlightDraft


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def flight_routes():
    """FlightRoutes over an empty in-memory store, patched into the API."""
    routes = FlightRoutes(db_path=":memory:")
    with patch("src.fastapi.flights_api.flight_routes", routes):
        yield routes
    routes.shutdown()


@pytest.fixture
def scenario_flights(flight_routes):
    """Reference network: NYC/LAX/SFO/CHI/SEA/BOS."""
    flight_routes.bulk_create_flights(
        [
            FlightDraft("NYC", "LAX", 300),
            FlightDraft("LAX", "SFO", 100),
            FlightDraft("NYC", "CHI", 200),
            FlightDraft("CHI", "LAX", 150),
            FlightDraft("SFO", "SEA", 120),
            FlightDraft("NYC", "BOS", 150),
            FlightDraft("BOS", "SEA", 400),
        ]
    )
    return flight_routes
