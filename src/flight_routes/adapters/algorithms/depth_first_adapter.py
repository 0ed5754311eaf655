"""
Depth-First Algorithm Adapter - Bridge between architecture and algorithm.

Converts the flight DataFrame into route_search Edges, runs the
exhaustive simple-path enumeration and converts the found paths to
Route schema objects.
"""

import logging
from typing import List, Optional

import pandas as pd

from src.route_search.graph import Edge, build_graph
from src.route_search.search import FoundPath, find_routes

from src.flight_routes.ports.route_finder import RouteFinder
from src.flight_routes.schemas.route import Route

logger = logging.getLogger(__name__)


def edges_from_df(flights_df: pd.DataFrame) -> List[Edge]:
    """
    Convert flight rows to Edges, preserving row order.

    Args:
        flights_df: DataFrame with source, destination and price columns.

    Returns:
        One Edge per row.
    """
    if flights_df.empty:
        return []

    return [
        Edge(source=str(source), destination=str(destination), price=int(price))
        for source, destination, price in zip(
            flights_df["source"].to_numpy(),
            flights_df["destination"].to_numpy(),
            flights_df["price"].to_numpy(),
        )
    ]


class DepthFirstRouteFinder(RouteFinder):
    """
    Adapter for the route_search depth-first enumerator.

    The adjacency graph is rebuilt from the given DataFrame on every
    call and never cached, so each search sees exactly the snapshot it
    was handed.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Depth-First Simple Path Enumeration"

    def find_routes(
        self,
        flights_df: pd.DataFrame,
        origin: str,
        destination: str,
        max_hops: Optional[int] = None,
    ) -> List[Route]:
        """
        Enumerate every simple route between two airports.

        Args:
            flights_df: Flight edges in storage order.
            origin: Departure airport code.
            destination: Arrival airport code.
            max_hops: Maximum flights per route (None = unlimited).

        Returns:
            Routes sorted by ascending total price, ties in discovery order.
        """
        graph = build_graph(edges_from_df(flights_df))

        paths = find_routes(graph, origin, destination, max_hops)

        logger.debug(
            "Found %d routes for %s -> %s (max_hops=%s) over %d airports",
            len(paths),
            origin,
            destination,
            max_hops,
            len(graph),
        )

        return [self._path_to_route(path) for path in paths]

    @staticmethod
    def _path_to_route(path: FoundPath) -> Route:
        return Route.from_cities(path.cities, path.price)
