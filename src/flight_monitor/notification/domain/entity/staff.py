from typing import ClassVar

from flight_monitor.flight.domain import Flight, FlightStatus
from flight_monitor.notification.domain.value_object import (
    STAFF_RECIPIENT,
    Notification,
)


class Staff:
    """空港スタッフ（空港ごとに1つ、特定のフライトには紐づかない）"""

    MESSAGES: ClassVar[dict[FlightStatus, str]] = {
        FlightStatus.WAITING: (
            "Staff: Preparing the flight to {destination}. Inform the passengers."
        ),
        FlightStatus.BOARDING: (
            "Staff: Boarding has started for the flight to {destination}. "
            "Organize the boarding process."
        ),
        FlightStatus.DEPARTED: (
            "Staff: The flight to {destination} has departed. "
            "Attend to the remaining passengers."
        ),
        FlightStatus.DELAYED: (
            "Staff: The flight to {destination} has been delayed. "
            "Update the schedule and notify the passengers."
        ),
        FlightStatus.CANCELLED: (
            "Staff: The flight to {destination} has been cancelled. "
            "Notify the passengers and arrange alternatives."
        ),
    }

    def notify(self, flight: Flight, status: FlightStatus) -> Notification:
        """フライトのステータス変更をスタッフ向けの通知にする"""
        message = self.MESSAGES[status]
        return Notification(
            recipient=STAFF_RECIPIENT,
            flight_id=flight.id,
            destination=str(flight.destination),
            status=status,
            message=message.format(destination=flight.destination),
        )
