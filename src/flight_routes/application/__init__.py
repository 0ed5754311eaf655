"""
Application layer for Flight Routes.

This layer provides the public API for the route service. It acts as a
facade, handling dependency initialization and providing a simple
interface for consumers.
"""

from src.flight_routes.application.flight_routes import FlightRoutes

__all__ = ["FlightRoutes"]
