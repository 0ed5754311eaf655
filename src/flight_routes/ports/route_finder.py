"""
Route Finder port interface.

Defines the abstract contract for route search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from src.flight_routes.schemas.flight import FlightDataFrame
    from src.flight_routes.schemas.route import Route


class RouteFinder(ABC):
    """
    Abstract interface for route search algorithms.

    Algorithm adapters receive the full flight DataFrame, a snapshot of
    the store taken for this one search, and build whatever structure
    they need from it.

    Implementations:
    - DepthFirstRouteFinder: Exhaustive enumeration of simple paths
    """

    @abstractmethod
    def find_routes(
        self,
        flights_df: FlightDataFrame,
        origin: str,
        destination: str,
        max_hops: Optional[int] = None,
    ) -> List[Route]:
        """
        Find routes between two airports.

        Args:
            flights_df: Validated flight edges in storage order.
            origin: Departure airport code.
            destination: Arrival airport code.
            max_hops: Maximum flights per route (None = unlimited).

        Returns:
            Routes sorted by ascending total price.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
