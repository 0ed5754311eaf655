"""
Route result schemas using Pandera.

Defines the output contract of the route search and a DataFrame
schema for batch export of results.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import pandas as pd
import pandera as pa
from pandera.typing import Series


class RouteSchema(pa.DataFrameModel):
    """
    Schema for exported route results.

    Each row represents one discovered route, in result order.
    """

    cities: Series[object] = pa.Field(
        nullable=False,
        description="Airport codes along the route, origin first",
    )
    total_price: Series[int] = pa.Field(
        ge=0,
        description="Sum of all leg prices",
    )
    num_hops: Series[int] = pa.Field(
        ge=0,
        description="Number of flights taken (cities - 1)",
    )

    class Config:
        strict = False
        coerce = True
        name = "RouteSchema"
        ordered = True


@dataclass(frozen=True)
class Route:
    """
    Immutable representation of a discovered route.

    Attributes:
        cities: Distinct airport codes in travel order, origin first.
        total_price: Sum of the prices of every leg (0 for a single city).
    """

    cities: Tuple[str, ...]
    total_price: int

    @property
    def num_hops(self) -> int:
        """Number of flights taken."""
        return len(self.cities) - 1

    @property
    def origin(self) -> str:
        return self.cities[0]

    @property
    def destination(self) -> str:
        return self.cities[-1]

    @classmethod
    def from_cities(cls, cities: Sequence[str], total_price: int) -> "Route":
        """
        Factory method to create a Route from a city sequence.

        Raises:
            ValueError: If the sequence is empty.
        """
        if not cities:
            raise ValueError("Route must contain at least one city")
        return cls(cities=tuple(cities), total_price=total_price)


def routes_to_df(routes: Sequence[Route]) -> pd.DataFrame:
    """
    Flatten routes into a DataFrame validated against RouteSchema.

    Args:
        routes: Routes in result order.

    Returns:
        One row per route with cities, total_price and num_hops.
    """
    df = pd.DataFrame(
        {
            "cities": [list(route.cities) for route in routes],
            "total_price": [route.total_price for route in routes],
            "num_hops": [route.num_hops for route in routes],
        }
    )
    return RouteSchema.validate(df)
