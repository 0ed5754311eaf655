"""Pytest configuration and fixtures for service tests."""

from typing import List, Optional

import pandas as pd
import pytest

from src.flight_routes.ports.flight_repository import FlightRepository
from src.flight_routes.schemas.flight import (
    FLIGHT_COLUMNS,
    Flight,
    FlightDataFrame,
    FlightSchema,
)


class MockFlightRepository(FlightRepository):
    """In-memory flight repository for testing."""

    def __init__(self, flights: Optional[List[Flight]] = None):
        self._flights: List[Flight] = []
        self._next_id = 1
        self.df_calls = 0
        for flight in flights or []:
            self.save(flight)

    def get_flights_df(self) -> FlightDataFrame:
        self.df_calls += 1
        if not self._flights:
            return pd.DataFrame(columns=FLIGHT_COLUMNS)
        rows = [(f.id, f.source, f.destination, f.price) for f in self._flights]
        return FlightSchema.validate(pd.DataFrame(rows, columns=FLIGHT_COLUMNS))

    def list_flights(self) -> List[Flight]:
        return list(self._flights)

    def find_by_route(self, source: str, destination: str) -> Optional[Flight]:
        for flight in self._flights:
            if flight.source == source and flight.destination == destination:
                return flight
        return None

    def save(self, flight: Flight) -> Flight:
        saved = flight.with_id(self._next_id)
        self._next_id += 1
        self._flights.append(saved)
        return saved

    def delete_all(self) -> int:
        removed = len(self._flights)
        self._flights.clear()
        return removed

    @property
    def name(self) -> str:
        return "Mock Repository"


@pytest.fixture
def empty_repository() -> MockFlightRepository:
    return MockFlightRepository()


@pytest.fixture
def scenario_repository() -> MockFlightRepository:
    """Reference network: NYC/LAX/SFO/CHI/SEA/BOS."""
    return MockFlightRepository(
        [
            Flight("NYC", "LAX", 300),
            Flight("LAX", "SFO", 100),
            Flight("NYC", "CHI", 200),
            Flight("CHI", "LAX", 150),
            Flight("SFO", "SEA", 120),
            Flight("NYC", "BOS", 150),
            Flight("BOS", "SEA", 400),
        ]
    )
