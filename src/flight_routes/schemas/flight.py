"""
Flight record schemas using Pandera.

Defines the contract for flight records flowing from storage into the
route search. Schema validation happens at the repository boundary,
not per-row.
"""

from dataclasses import dataclass
from typing import Optional

import pandera as pa
from pandera.typing import DataFrame, Series


FLIGHT_COLUMNS = ["id", "source", "destination", "price"]


class FlightSchema(pa.DataFrameModel):
    """
    Stored flight records, one directed priced edge per row.

    Row order is storage (insertion) order, which the route search
    relies on for deterministic traversal.
    """

    id: Series[int] = pa.Field(
        ge=1,
        unique=True,
        description="Storage identifier, increasing with insertion order",
    )
    source: Series[str] = pa.Field(
        nullable=False,
        description="Departure airport code (e.g., 'NYC')",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Arrival airport code",
    )
    price: Series[int] = pa.Field(
        ge=0,
        description="Ticket price in whole currency units",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightSchema"
        description = "Flight edges required by the route search"


# Type alias for clarity in function signatures
FlightDataFrame = DataFrame[FlightSchema]


@dataclass(frozen=True)
class FlightDraft:
    """
    Unvalidated flight record as submitted by a client.

    Every field may be missing; FlightService decides whether the
    record is acceptable.
    """

    source: Optional[str] = None
    destination: Optional[str] = None
    price: Optional[int] = None


@dataclass(frozen=True)
class Flight:
    """
    Immutable stored flight record.

    Attributes:
        source: Departure airport code.
        destination: Arrival airport code.
        price: Non-negative ticket price.
        id: Storage identifier (None until saved).
    """

    source: str
    destination: str
    price: int
    id: Optional[int] = None

    def with_id(self, flight_id: int) -> "Flight":
        """Copy of this flight carrying its storage id."""
        return Flight(
            source=self.source,
            destination=self.destination,
            price=self.price,
            id=flight_id,
        )
