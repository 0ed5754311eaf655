"""
Flight Repository port interface.

Defines the abstract contract for stores that hold flight records.
Implementations handle the specifics of different backends (SQL, memory).
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.flight_routes.schemas.flight import Flight, FlightDataFrame


class FlightRepository(ABC):
    """
    Abstract interface for flight record storage.

    The route search reads the whole edge list as a validated DataFrame;
    the record service reads and writes individual Flight objects.

    Implementations:
    - SQLiteFlightRepository: sqlite3 table read through pandas
    - MockFlightRepository: In-memory list for testing
    """

    @abstractmethod
    def get_flights_df(self) -> FlightDataFrame:
        """
        Return every stored flight as a validated DataFrame.

        Rows are in insertion order. Schema validation (FlightSchema)
        happens here at the boundary.

        Raises:
            pandera.errors.SchemaError, pandera.errors.SchemaErrors: If stored
                data fails validation.
            RepositoryError: If the store is unavailable.
        """
        ...

    @abstractmethod
    def list_flights(self) -> List[Flight]:
        """Return every stored flight in insertion order."""
        ...

    @abstractmethod
    def find_by_route(self, source: str, destination: str) -> Optional[Flight]:
        """
        Look up the flight between two airports.

        Returns:
            The stored flight, or None if there is none.
        """
        ...

    @abstractmethod
    def save(self, flight: Flight) -> Flight:
        """
        Store a new flight.

        Returns:
            The stored flight with its assigned id.
        """
        ...

    @abstractmethod
    def delete_all(self) -> int:
        """
        Remove every stored flight.

        Returns:
            Number of flights removed.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this repository."""
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the store is currently available.

        Default implementation returns True. Override for stores
        that need connection health checks.
        """
        return True

    def close(self) -> None:
        """Release any held resources. No-op by default."""
        return None
