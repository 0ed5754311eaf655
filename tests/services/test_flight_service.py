"""
Tests for FlightService record validation.

Tests cover:
- Each rejection rule and its message
- Order in which rules are checked
- Bulk creation semantics (in-batch duplicates, partial storage)
- Listing and deleting flights
"""

import pytest

from src.flight_routes.exceptions import (
    DuplicateFlightError,
    FlightValidationError,
    InvalidAirportCodeError,
    MissingFieldError,
    NegativePriceError,
    SameAirportError,
)
from src.flight_routes.schemas.flight import Flight, FlightDraft
from src.flight_routes.services.flight_service import FlightService


@pytest.fixture
def service(empty_repository) -> FlightService:
    return FlightService(empty_repository)


# =============================================================================
# CREATE FLIGHT TESTS
# =============================================================================


class TestCreateFlight:

    def test_valid_flight_is_stored(self, service, empty_repository):
        created = service.create_flight(FlightDraft("NYC", "LAX", 300))

        assert created == Flight("NYC", "LAX", 300, id=1)
        assert empty_repository.list_flights() == [created]

    def test_zero_price_allowed(self, service):
        assert service.create_flight(FlightDraft("NYC", "LAX", 0)).price == 0

    def test_reverse_direction_is_a_different_flight(self, service):
        service.create_flight(FlightDraft("NYC", "LAX", 300))
        assert service.create_flight(FlightDraft("LAX", "NYC", 280)).id == 2

    @pytest.mark.parametrize(
        "draft",
        [
            FlightDraft(None, "LAX", 300),
            FlightDraft("NYC", None, 300),
            FlightDraft("NYC", "LAX", None),
            FlightDraft(),
        ],
    )
    def test_missing_fields_rejected(self, service, draft):
        with pytest.raises(MissingFieldError, match="cannot be null"):
            service.create_flight(draft)

    def test_same_airport_rejected(self, service):
        with pytest.raises(SameAirportError, match="cannot be the same"):
            service.create_flight(FlightDraft("NYC", "NYC", 300))

    def test_negative_price_rejected(self, service):
        with pytest.raises(NegativePriceError, match="Price cannot be negative"):
            service.create_flight(FlightDraft("NYC", "LAX", -1))

    def test_duplicate_rejected(self, service):
        service.create_flight(FlightDraft("NYC", "LAX", 300))

        with pytest.raises(DuplicateFlightError) as exc_info:
            service.create_flight(FlightDraft("NYC", "LAX", 250))

        assert str(exc_info.value) == "Flight from NYC to LAX already exists."
        assert exc_info.value.source == "NYC"
        assert exc_info.value.destination == "LAX"

    @pytest.mark.parametrize(
        "source, destination",
        [("NY", "LAX"), ("NYC", "LAXX"), ("", "LAX"), ("JFKX", "LA")],
    )
    def test_code_length_rejected(self, service, source, destination):
        with pytest.raises(InvalidAirportCodeError, match="must be 3 characters long"):
            service.create_flight(FlightDraft(source, destination, 100))

    def test_rejected_flight_not_stored(self, service, empty_repository):
        with pytest.raises(FlightValidationError):
            service.create_flight(FlightDraft("NY", "LAX", 100))
        assert empty_repository.list_flights() == []

    def test_custom_code_length(self, empty_repository):
        service = FlightService(empty_repository, code_length=4)
        assert service.create_flight(FlightDraft("KJFK", "KLAX", 300)).id == 1
        with pytest.raises(InvalidAirportCodeError, match="must be 4 characters long"):
            service.create_flight(FlightDraft("JFK", "LAX", 300))


class TestValidationOrder:
    """The first failing rule wins."""

    def test_null_checked_before_same_airport(self, service):
        with pytest.raises(MissingFieldError):
            service.create_flight(FlightDraft("NYC", "NYC", None))

    def test_same_airport_checked_before_price(self, service):
        with pytest.raises(SameAirportError):
            service.create_flight(FlightDraft("NYC", "NYC", -5))

    def test_price_checked_before_duplicate(self, service):
        service.create_flight(FlightDraft("NYC", "LAX", 300))
        with pytest.raises(NegativePriceError):
            service.create_flight(FlightDraft("NYC", "LAX", -5))

    def test_duplicate_checked_before_code_length(self, empty_repository):
        # A legacy record with a bad code, stored without validation
        empty_repository.save(Flight("NY", "LAX", 100))
        service = FlightService(empty_repository)

        with pytest.raises(DuplicateFlightError):
            service.create_flight(FlightDraft("NY", "LAX", 100))

    def test_same_airport_checked_before_code_length(self, service):
        with pytest.raises(SameAirportError):
            service.create_flight(FlightDraft("NY", "NY", 100))


# =============================================================================
# BULK CREATE TESTS
# =============================================================================


class TestBulkCreateFlights:

    def test_all_valid(self, service):
        created = service.bulk_create_flights(
            [FlightDraft("NYC", "LAX", 300), FlightDraft("LAX", "SFO", 100)]
        )
        assert [f.id for f in created] == [1, 2]

    def test_empty_batch(self, service):
        assert service.bulk_create_flights([]) == []

    def test_duplicate_inside_batch_rejected(self, service, empty_repository):
        with pytest.raises(DuplicateFlightError):
            service.bulk_create_flights(
                [FlightDraft("NYC", "LAX", 300), FlightDraft("NYC", "LAX", 200)]
            )
        assert len(empty_repository.list_flights()) == 1

    def test_flights_before_failure_are_kept(self, service, empty_repository):
        with pytest.raises(NegativePriceError):
            service.bulk_create_flights(
                [
                    FlightDraft("NYC", "LAX", 300),
                    FlightDraft("LAX", "SFO", -1),
                    FlightDraft("SFO", "SEA", 120),
                ]
            )
        stored = empty_repository.list_flights()
        assert [(f.source, f.destination) for f in stored] == [("NYC", "LAX")]


# =============================================================================
# LIST / DELETE TESTS
# =============================================================================


class TestListAndDelete:

    def test_list_flights(self, scenario_repository):
        service = FlightService(scenario_repository)
        flights = service.list_flights()
        assert len(flights) == 7
        assert flights[0].source == "NYC"

    def test_delete_all(self, scenario_repository):
        service = FlightService(scenario_repository)
        assert service.delete_all_flights() == 7
        assert service.list_flights() == []
