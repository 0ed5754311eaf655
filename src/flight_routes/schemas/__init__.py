"""
Schema definitions for Flight Routes.

Pandera-validated DataFrames and frozen dataclasses as data contracts.
"""

from .flight import FLIGHT_COLUMNS, Flight, FlightDataFrame, FlightDraft, FlightSchema
from .query import RouteQuery
from .route import Route, RouteSchema, routes_to_df

__all__ = [
    # Flight schemas
    "FLIGHT_COLUMNS",
    "Flight",
    "FlightDraft",
    "FlightSchema",
    "FlightDataFrame",
    # Query
    "RouteQuery",
    # Route schemas
    "Route",
    "RouteSchema",
    "routes_to_df",
]
