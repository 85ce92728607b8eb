import pytest

from flight_monitor.airport.applications import (
    ChangeFlightStatusService,
    StatusChangeResult,
)
from flight_monitor.airport.domain import FlightNotFoundException
from flight_monitor.flight.domain import FlightStatus, InvalidStatusTransitionException


class TestChangeFlightStatusService:
    def test_change_returns_flight_and_events(self, airport):
        airport.add_flight("Rome")
        airport.register_passenger("Anna", 0)
        service = ChangeFlightStatusService(airport=airport)

        result = service.change(0, FlightStatus.BOARDING)

        assert isinstance(result, StatusChangeResult)
        assert result.flight.status == FlightStatus.BOARDING
        assert result.previous_status == FlightStatus.WAITING
        assert [e.recipient for e in result.events] == ["announcement", "staff", "Anna"]
        assert airport.pending_domain_events == 0

    def test_terminal_change_releases_flight(self, airport):
        flight = airport.add_flight("Rome")
        airport.register_passenger("Anna", 0)
        service = ChangeFlightStatusService(airport=airport)

        result = service.change(0, FlightStatus.CANCELLED)

        assert result.flight is flight
        assert flight.listener_count == 0
        assert airport.statistics().cancelled == 1

    def test_invalid_transition_propagates(self, airport):
        airport.add_flight("Paris")
        service = ChangeFlightStatusService(airport=airport)

        with pytest.raises(InvalidStatusTransitionException):
            service.change(0, FlightStatus.DEPARTED)

        assert airport.flights[0].status == FlightStatus.WAITING

    def test_unknown_flight_propagates(self, airport):
        airport.add_flight("Paris")
        service = ChangeFlightStatusService(airport=airport)

        with pytest.raises(FlightNotFoundException):
            service.change(2, FlightStatus.BOARDING)
