import pytest

from flight_monitor.flight.domain import FlightStatus
from flight_monitor.notification.domain.entity import Passenger
from flight_monitor.notification.domain.value_object import (
    Notification,
    PassengerId,
    PassengerName,
)


class TestPassenger:
    @pytest.fixture
    def create_passenger(self):
        def _factory(passenger_id: str = "passenger-1", name: str = "Anna") -> Passenger:
            return Passenger(id=PassengerId(value=passenger_id), name=PassengerName(name))

        return _factory

    def test_notify_returns_notification(self, create_passenger, create_flight):
        passenger = create_passenger()
        flight = create_flight(destination="Rome", status=FlightStatus.CANCELLED)

        notification = passenger.notify(flight, FlightStatus.CANCELLED)

        assert notification == Notification(
            recipient="Anna",
            flight_id=flight.id,
            destination="Rome",
            status=FlightStatus.CANCELLED,
            message=(
                "Passenger Anna! Unfortunately, your flight to Rome has been "
                "cancelled. Please contact the information desk."
            ),
        )
        assert str(notification) == notification.message

    @pytest.mark.parametrize(
        "status, expected",
        [
            (FlightStatus.WAITING, "is waiting"),
            (FlightStatus.BOARDING, "Boarding has started"),
            (FlightStatus.DEPARTED, "has departed"),
            (FlightStatus.DELAYED, "has been delayed"),
            (FlightStatus.CANCELLED, "has been cancelled"),
        ],
    )
    def test_message_per_status(self, create_passenger, create_flight, status, expected):
        notification = create_passenger(name="Bob").notify(create_flight(), status)

        assert notification.message.startswith("Passenger Bob!")
        assert expected in notification.message
        assert "Paris" in notification.message

    def test_passengers_with_same_name_are_different(self, create_passenger):
        first = create_passenger(passenger_id="passenger-1", name="Anna")
        second = create_passenger(passenger_id="passenger-2", name="Anna")

        assert first != second
        assert first.name == second.name
