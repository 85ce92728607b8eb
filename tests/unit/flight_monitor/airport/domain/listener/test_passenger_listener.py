from unittest.mock import MagicMock

from flight_monitor.airport.domain.listener import PassengerListener
from flight_monitor.flight.domain import FlightStatus
from flight_monitor.notification.domain import Passenger, PassengerId, PassengerName


class TestPassengerListener:
    def _listener(self, publish):
        passenger = Passenger(id=PassengerId(value="passenger-1"), name=PassengerName("Anna"))
        return PassengerListener(passenger, publish=publish)

    def test_publishes_passenger_notification(self, create_flight):
        publish = MagicMock()
        listener = self._listener(publish)
        flight = create_flight()
        flight.request_transition(FlightStatus.BOARDING)

        listener(flight, FlightStatus.BOARDING)

        publish.assert_called_once()
        notification = publish.call_args[0][0]
        assert notification.recipient == "Anna"
        assert notification.status == FlightStatus.BOARDING

    def test_delivers_once_per_flight_version(self, create_flight):
        publish = MagicMock()
        listener = self._listener(publish)
        flight = create_flight()
        flight.request_transition(FlightStatus.BOARDING)

        listener(flight, FlightStatus.BOARDING)
        listener(flight, FlightStatus.BOARDING)

        assert publish.call_count == 1

    def test_delivers_again_after_next_transition(self, create_flight):
        publish = MagicMock()
        listener = self._listener(publish)
        flight = create_flight()
        flight.subscribe(listener)

        flight.request_transition(FlightStatus.DELAYED)
        flight.request_transition(FlightStatus.BOARDING)

        statuses = [c[0][0].status for c in publish.call_args_list]
        assert statuses == [FlightStatus.DELAYED, FlightStatus.BOARDING]

    def test_exposes_passenger(self):
        listener = self._listener(MagicMock())
        assert str(listener.passenger.name) == "Anna"
