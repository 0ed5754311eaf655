"""
Algorithm adapters for route search.
"""

from src.flight_routes.adapters.algorithms.depth_first_adapter import (
    DepthFirstRouteFinder,
    edges_from_df,
)

__all__ = [
    "DepthFirstRouteFinder",
    "edges_from_df",
]
