"""
Route query schema.

Defines the validated search parameters passed to the route finder.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RouteQuery:
    """
    Immutable route search parameters.

    Attributes:
        origin: Departure airport code.
        destination: Arrival airport code.
        max_hops: Maximum number of flights per route (None = unlimited).
    """

    origin: str
    destination: str
    max_hops: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate query after initialization."""
        if not self.origin:
            raise ValueError("origin cannot be empty")
        if not self.destination:
            raise ValueError("destination cannot be empty")
        if self.max_hops is not None and self.max_hops < 0:
            raise ValueError(f"max_hops must be >= 0, got {self.max_hops}")
