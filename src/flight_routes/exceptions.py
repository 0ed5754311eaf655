"""
Custom exceptions for the flight_routes package.

Provides a hierarchy of exceptions for clear error handling of flight
record validation and storage operations. Route search itself never
raises: an unreachable destination is an empty result, not an error.
"""


class FlightRoutesError(Exception):
    """Base exception for all flight_routes errors."""

    pass


class FlightValidationError(FlightRoutesError):
    """Base exception for rejected flight records."""

    pass


class MissingFieldError(FlightValidationError):
    """Raised when source, destination or price is missing."""

    def __init__(
        self, message: str = "Source, destination and price cannot be null"
    ) -> None:
        super().__init__(message)


class SameAirportError(FlightValidationError):
    """Raised when a flight departs from and arrives at the same airport."""

    def __init__(self, airport: str) -> None:
        self.airport = airport
        super().__init__("Source and destination cannot be the same")


class NegativePriceError(FlightValidationError):
    """Raised when a flight price is below zero."""

    def __init__(self, price: int) -> None:
        self.price = price
        super().__init__("Price cannot be negative")


class DuplicateFlightError(FlightValidationError):
    """Raised when a flight between the same two airports already exists."""

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        message = f"Flight from {source} to {destination} already exists."
        super().__init__(message)


class InvalidAirportCodeError(FlightValidationError):
    """Raised when an airport code has the wrong length."""

    def __init__(self, code: str, length: int = 3) -> None:
        self.code = code
        self.length = length
        message = f"Source and destination must be {length} characters long"
        super().__init__(message)


class RepositoryError(FlightRoutesError):
    """Raised when the flight store cannot be read or written."""

    pass
