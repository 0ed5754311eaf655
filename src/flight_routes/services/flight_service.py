"""
Flight Service - record-level validation and storage orchestration.

Every flight record is checked here before it can reach the store,
so the route search can trust its edges: non-null fields, distinct
endpoints, non-negative price, one flight per airport pair and
fixed-length airport codes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List

from src.flight_routes.config import Config
from src.flight_routes.exceptions import (
    DuplicateFlightError,
    InvalidAirportCodeError,
    MissingFieldError,
    NegativePriceError,
    SameAirportError,
)
from src.flight_routes.schemas.flight import Flight, FlightDraft

if TYPE_CHECKING:
    from src.flight_routes.ports.flight_repository import FlightRepository

logger = logging.getLogger(__name__)


class FlightService:
    """
    Domain service for creating and managing flight records.

    Attributes:
        _repo: Store for flight records.
        _code_length: Required length of airport codes.
    """

    def __init__(
        self,
        repository: FlightRepository,
        code_length: int = Config.CODE_LENGTH,
    ) -> None:
        self._repo = repository
        self._code_length = code_length

    def create_flight(self, draft: FlightDraft) -> Flight:
        """
        Validate and store a single flight.

        Checks run in a fixed order and the first failure is raised.

        Args:
            draft: Submitted flight record.

        Returns:
            The stored flight with its id.

        Raises:
            MissingFieldError: If source, destination or price is None.
            SameAirportError: If source equals destination.
            NegativePriceError: If price is below zero.
            DuplicateFlightError: If the airport pair is already stored.
            InvalidAirportCodeError: If a code has the wrong length.
        """
        if draft.source is None or draft.destination is None or draft.price is None:
            raise MissingFieldError()
        if draft.source == draft.destination:
            raise SameAirportError(draft.source)
        if draft.price < 0:
            raise NegativePriceError(draft.price)
        if self._repo.find_by_route(draft.source, draft.destination) is not None:
            raise DuplicateFlightError(draft.source, draft.destination)
        for code in (draft.destination, draft.source):
            if len(code) != self._code_length:
                raise InvalidAirportCodeError(code, self._code_length)

        saved = self._repo.save(
            Flight(source=draft.source, destination=draft.destination, price=draft.price)
        )
        logger.info(
            "Created flight %s -> %s (%d) with id %s",
            saved.source,
            saved.destination,
            saved.price,
            saved.id,
        )
        return saved

    def bulk_create_flights(self, drafts: Iterable[FlightDraft]) -> List[Flight]:
        """
        Validate and store flights one after another.

        Each flight is stored before the next is checked, so a duplicate
        pair within the batch is rejected as well. The first rejected
        record aborts the batch; flights stored before it are kept.

        Raises:
            FlightValidationError: For the first rejected record.
        """
        created = [self.create_flight(draft) for draft in drafts]
        logger.info("Bulk created %d flights", len(created))
        return created

    def list_flights(self) -> List[Flight]:
        """Return every stored flight in insertion order."""
        return self._repo.list_flights()

    def delete_all_flights(self) -> int:
        """Remove every stored flight and return the count removed."""
        removed = self._repo.delete_all()
        logger.info("Removed all %d flights", removed)
        return removed
