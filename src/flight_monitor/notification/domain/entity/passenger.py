from typing import ClassVar

from flight_monitor.flight.domain import Flight, FlightStatus
from flight_monitor.notification.domain.value_object import (
    Notification,
    PassengerId,
    PassengerName,
)
from flight_monitor.shared.domain import Entity


class Passenger(Entity[PassengerId]):
    """乗客

    同名の乗客でも PassengerId が異なれば別の乗客として扱う。
    """

    MESSAGES: ClassVar[dict[FlightStatus, str]] = {
        FlightStatus.WAITING: (
            "Passenger {name}! Your flight to {destination} is waiting. "
            "Please be ready."
        ),
        FlightStatus.BOARDING: (
            "Passenger {name}! Boarding has started for your flight to "
            "{destination}. Please proceed to the aircraft."
        ),
        FlightStatus.DEPARTED: (
            "Passenger {name}! Your flight to {destination} has departed. "
            "Have a comfortable trip!"
        ),
        FlightStatus.DELAYED: (
            "Passenger {name}! Your flight to {destination} has been delayed. "
            "Please wait for further instructions."
        ),
        FlightStatus.CANCELLED: (
            "Passenger {name}! Unfortunately, your flight to {destination} has "
            "been cancelled. Please contact the information desk."
        ),
    }

    def __init__(self, id: PassengerId, name: PassengerName) -> None:
        super().__init__(id)
        self._name = name

    @property
    def name(self) -> PassengerName:
        return self._name

    def notify(self, flight: Flight, status: FlightStatus) -> Notification:
        """フライトのステータス変更を乗客向けの通知にする"""
        message = self.MESSAGES[status]
        return Notification(
            recipient=str(self._name),
            flight_id=flight.id,
            destination=str(flight.destination),
            status=status,
            message=message.format(name=self._name, destination=flight.destination),
        )
