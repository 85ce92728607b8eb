from unittest.mock import MagicMock

from flight_monitor.airport.applications import AddFlightService
from flight_monitor.flight.domain import Flight, FlightStatus


class TestAddFlightService:
    def test_add_delegates_to_airport(self, create_flight):
        mock_airport = MagicMock()
        mock_airport.add_flight.return_value = create_flight(destination="Rome", is_vip=True)
        service = AddFlightService(airport=mock_airport)

        flight = service.add("Rome", is_vip=True)

        mock_airport.add_flight.assert_called_once_with("Rome", True)
        assert flight is mock_airport.add_flight.return_value

    def test_add_registers_flight(self, airport):
        service = AddFlightService(airport=airport)

        flight = service.add("Paris")

        assert isinstance(flight, Flight)
        assert flight.status == FlightStatus.WAITING
        assert airport.flights == (flight,)
