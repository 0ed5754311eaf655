"""
FlightRoutes Use Case - Public API for the flight route service.

This module provides the main entry point for consumers. It acts as a
Facade/Factory, handling dependency initialization and exposing a
simple interface over route search and flight record management.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from src.flight_routes.adapters.algorithms.depth_first_adapter import (
    DepthFirstRouteFinder,
)
from src.flight_routes.adapters.repositories.sqlite_flight_repo import (
    SQLiteFlightRepository,
)
from src.flight_routes.config import Config
from src.flight_routes.ports.flight_repository import FlightRepository
from src.flight_routes.ports.route_finder import RouteFinder
from src.flight_routes.schemas.flight import Flight, FlightDraft
from src.flight_routes.schemas.route import Route
from src.flight_routes.services.flight_service import FlightService
from src.flight_routes.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


class FlightRoutes:
    """
    Public API for the flight route service.

    Example usage:
        >>> app = FlightRoutes(db_path=":memory:")
        >>> app.create_flight(FlightDraft("NYC", "LAX", 300))
        >>> for route in app.find_routes("NYC", "LAX"):
        ...     print(route.cities, route.total_price)

    Attributes:
        _repository: Flight record store.
        _flights: Record validation service.
        _routes: Route search service.
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        repository: Optional[FlightRepository] = None,
        route_finder: Optional[RouteFinder] = None,
    ) -> None:
        """
        Initialize the service with optional custom dependencies.

        Args:
            db_path: Path to SQLite database. Defaults to Config.DB_PATH.
            repository: Custom store. If None, uses SQLiteFlightRepository.
            route_finder: Custom algorithm. If None, uses DepthFirstRouteFinder.
        """
        if repository is not None:
            self._repository = repository
        else:
            self._repository = SQLiteFlightRepository(db_path or Config.DB_PATH)

        self._route_finder = route_finder or DepthFirstRouteFinder()

        self._flights = FlightService(self._repository)
        self._routes = RouteFinderService(
            repository=self._repository,
            route_finder=self._route_finder,
        )

        logger.info(
            "FlightRoutes initialized with %s store and %s algorithm",
            self._repository.name,
            self._route_finder.name,
        )

    def find_routes(
        self,
        origin: str,
        destination: str,
        max_hops: Optional[int] = None,
    ) -> List[Route]:
        """
        Find every simple route between two airports, cheapest first.

        Args:
            origin: Departure airport code.
            destination: Arrival airport code.
            max_hops: Maximum number of flights (None = unlimited).
        """
        return self._routes.find_routes(origin, destination, max_hops)

    def create_flight(self, draft: FlightDraft) -> Flight:
        """Validate and store one flight."""
        return self._flights.create_flight(draft)

    def bulk_create_flights(self, drafts: Iterable[FlightDraft]) -> List[Flight]:
        """Validate and store flights in order, stopping at the first rejection."""
        return self._flights.bulk_create_flights(drafts)

    def list_flights(self) -> List[Flight]:
        """All stored flights in insertion order."""
        return self._flights.list_flights()

    def delete_all_flights(self) -> int:
        """Remove every stored flight."""
        return self._flights.delete_all_flights()

    @property
    def is_ready(self) -> bool:
        """Check if the service is ready to handle requests."""
        return self._routes.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._routes.algorithm_name

    def shutdown(self) -> None:
        """
        Clean shutdown of the service.

        Closes database connections. Should be called when the service
        is no longer needed.
        """
        self._repository.close()
        logger.info("FlightRoutes shutdown complete")

    def __enter__(self) -> "FlightRoutes":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
