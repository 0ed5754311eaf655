"""
Route Finder Service - Domain orchestrator for route searches.

Coordinates the interaction between:
- FlightRepository (current flight edges)
- RouteFinder (algorithm adapter)
- RouteQuery (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional

from src.flight_routes.schemas.query import RouteQuery
from src.flight_routes.schemas.route import Route

if TYPE_CHECKING:
    from src.flight_routes.ports.flight_repository import FlightRepository
    from src.flight_routes.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for finding flight routes.

    Orchestrates the search:
    1. Validates the query
    2. Takes a fresh snapshot of the stored flights
    3. Delegates the search to the algorithm adapter
    4. Logs performance metrics

    This service holds no per-search state and is thread-safe as long
    as the repository is.

    Attributes:
        _repo: Store providing the flight edges.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(
        self,
        repository: FlightRepository,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            repository: Store for the flight edge list.
            route_finder: Algorithm adapter (e.g., DepthFirstRouteFinder).
        """
        self._repo = repository
        self._route_finder = route_finder

    def find_routes(
        self,
        origin: str,
        destination: str,
        max_hops: Optional[int] = None,
    ) -> List[Route]:
        """
        Find every simple route between two airports.

        Args:
            origin: Departure airport code (e.g., 'NYC').
            destination: Arrival airport code.
            max_hops: Maximum number of flights per route (None = unlimited).

        Returns:
            Routes sorted by ascending total price. Empty if none exist.

        Raises:
            ValueError: If the query is invalid.
            RepositoryError: If the flight store cannot be read.
        """
        start_time = time.perf_counter()

        # 1. Validate and create immutable query
        query = RouteQuery(origin=origin, destination=destination, max_hops=max_hops)

        logger.debug(
            "Search query: origin=%s, destination=%s, max_hops=%s",
            query.origin,
            query.destination,
            query.max_hops,
        )

        # 2. Snapshot the current flights
        load_start = time.perf_counter()
        flights_df = self._repo.get_flights_df()
        load_time = time.perf_counter() - load_start

        # 3. Delegate to algorithm adapter
        algo_start = time.perf_counter()
        routes = self._route_finder.find_routes(
            flights_df=flights_df,
            origin=query.origin,
            destination=query.destination,
            max_hops=query.max_hops,
        )
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        logger.info(
            "Route search %s -> %s completed: %d routes over %d flights in %.3fms "
            "(load: %.3fms, algo: %.3fms)",
            query.origin,
            query.destination,
            len(routes),
            len(flights_df),
            total_time * 1000,
            load_time * 1000,
            algo_time * 1000,
        )

        return routes

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if service is ready to handle requests."""
        return self._repo.is_available
