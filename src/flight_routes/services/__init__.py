"""
Domain services for Flight Routes.

Services orchestrate the interaction between ports (repositories,
algorithms) and domain rules (record validation, query validation).
"""

from src.flight_routes.services.flight_service import FlightService
from src.flight_routes.services.route_finder_service import RouteFinderService

__all__ = ["FlightService", "RouteFinderService"]
