"""
Port interfaces for Flight Routes.

Ports define the abstract interfaces that the domain layer uses to
communicate with storage and algorithms (Ports and Adapters pattern).
"""

from src.flight_routes.ports.flight_repository import FlightRepository
from src.flight_routes.ports.route_finder import RouteFinder

__all__ = [
    "FlightRepository",
    "RouteFinder",
]
